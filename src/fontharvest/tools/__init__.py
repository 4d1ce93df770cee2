"""Offline build tools for fontharvest."""
