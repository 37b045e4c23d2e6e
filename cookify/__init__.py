"""Cookify: bilingual recipe catalog API."""
