"""Venue 'open in maps' links."""
import re
from urllib.parse import quote

_APPLE_PLATFORM_RE = re.compile(r"iPad|iPhone|iPod|Macintosh")


def maps_links(address: str) -> dict[str, str]:
    q = quote(address, safe="!~*'()")
    return {
        "apple": f"https://maps.apple.com/?q={q}",
        "google": f"https://www.google.com/maps/search/?api=1&query={q}",
    }


def preferred_maps_url(address: str, user_agent: str = "") -> str:
    """Apple Maps for Apple devices, Google Maps for everything else."""
    links = maps_links(address)
    if _APPLE_PLATFORM_RE.search(user_agent or ""):
        return links["apple"]
    return links["google"]
