"""
Registry of available examples.
"""
from typing import List, TypedDict


class ExampleMetadata(TypedDict):
    path: str
    tags: List[str]
    description: str


EXAMPLES: List[ExampleMetadata] = [
    {
        "path": "basic/01_laplace_noise.py",
        "tags": ["basic", "laplace"],
        "description": "Single noisy count, batch draws, mechanism lifecycle and empirical moments.",
    },
    {
        "path": "basic/02_county_composition.py",
        "tags": ["basic", "composition"],
        "description": "Per-county counts under parallel composition and a week under sequential composition.",
    },
]
