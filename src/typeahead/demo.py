"""Sample data and lookup functions for the demo application."""

import asyncio
import random

from rich.text import Text

from typeahead.domain.types import Candidate, Suggestion

CHARACTERS: list[tuple[str, str]] = [
    ("Albedo", "geo"),
    ("Alhaitham", "dendro"),
    ("Amber", "pyro"),
    ("Ayaka", "cryo"),
    ("Barbara", "hydro"),
    ("Beidou", "electro"),
    ("Bennett", "pyro"),
    ("Chongyun", "cryo"),
    ("Diluc", "pyro"),
    ("Diona", "cryo"),
    ("Eula", "cryo"),
    ("Fischl", "electro"),
    ("Ganyu", "cryo"),
    ("Hu Tao", "pyro"),
    ("Jean", "anemo"),
    ("Kaeya", "cryo"),
    ("Keqing", "electro"),
    ("Klee", "pyro"),
    ("Lisa", "electro"),
    ("Mona", "hydro"),
    ("Nahida", "dendro"),
    ("Ningguang", "geo"),
    ("Noelle", "geo"),
    ("Qiqi", "cryo"),
    ("Razor", "electro"),
    ("Sucrose", "anemo"),
    ("Venti", "anemo"),
    ("Xiangling", "pyro"),
    ("Xingqiu", "hydro"),
    ("Zhongli", "geo"),
]

ELEMENT_STYLES = {
    "anemo": "cyan",
    "cryo": "bright_blue",
    "dendro": "green",
    "electro": "magenta",
    "geo": "yellow",
    "hydro": "blue",
    "pyro": "red",
}

FAILING_QUERY = "error"


def match_characters(query: str) -> list[Suggestion]:
    """Case-insensitive substring match over the sample data."""
    needle = query.lower()
    return [
        Suggestion(value=name, data={"element": element})
        for name, element in CHARACTERS
        if needle in name.lower()
    ]


def make_async_lookup(latency: float = 0.3, jitter: float = 0.0):
    """
    Build an asynchronous lookup simulating a remote search service.

    Args:
        latency: Base response delay in seconds
        jitter: Extra random delay in seconds, so responses can arrive out of order

    Returns:
        Coroutine function usable as a controller lookup
    """

    async def lookup(query: str) -> list[Suggestion]:
        await asyncio.sleep(latency + random.uniform(0, jitter))
        if query.lower() == FAILING_QUERY:
            raise ConnectionError(f"search backend rejected {query!r}")
        return match_characters(query)

    return lookup


def render_character(candidate: Candidate) -> Text:
    """Render a sample candidate with its element tag."""
    element = getattr(candidate, "data", {}).get("element", "")
    return Text.assemble(
        (candidate.value, "bold"),
        "  ",
        (element, ELEMENT_STYLES.get(element, "dim")),
    )
