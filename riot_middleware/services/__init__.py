"""Integrations with the Riot Games API and the Appwrite identity service."""
