"""
Example data used to seed an empty catalog.
"""

from __future__ import annotations

from typing import List, Dict

from .models import Application

DEFAULT_APPLICATIONS: List[Dict[str, str]] = [
    {
        "id": "1",
        "name": "Code Generator",
        "description": "AI-powered code generation tool that creates consistent, "
                       "clean code based on your requirements.",
        "link": "https://example.com/code-generator",
        "imageUrl": "https://images.unsplash.com/photo-1488590528505-98d2b5aba04b",
    },
    {
        "id": "2",
        "name": "API Manager",
        "description": "Centralized platform for managing, monitoring, and securing "
                       "all your API endpoints.",
        "link": "https://example.com/api-manager",
        "imageUrl": "https://images.unsplash.com/photo-1461749280684-dccba630e2f6",
    },
    {
        "id": "3",
        "name": "Database Explorer",
        "description": "Powerful tool for visualizing and interacting with database "
                       "structures and data.",
        "link": "https://example.com/database-explorer",
        "imageUrl": "https://images.unsplash.com/photo-1518770660439-4636190af475",
    },
]

# Stock images offered by the admin form for quick selection
SAMPLE_IMAGES: List[str] = [
    "https://images.unsplash.com/photo-1649972904349-6e44c42644a7",
    "https://images.unsplash.com/photo-1488590528505-98d2b5aba04b",
    "https://images.unsplash.com/photo-1518770660439-4636190af475",
    "https://images.unsplash.com/photo-1461749280684-dccba630e2f6",
    "https://images.unsplash.com/photo-1486312338219-ce68d2c6f44d",
]


def build_seed(timestamp: str, entries: List[Dict[str, str]] = DEFAULT_APPLICATIONS) -> List[Application]:
    """Materialize seed entries, all stamped with ``timestamp``."""
    return [
        Application.from_dict({**entry, "createdAt": timestamp})
        for entry in entries
    ]
