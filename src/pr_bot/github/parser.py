"""
Link Header Parser

Parses RFC 8288 ``Link`` response headers, which GitHub uses to advertise
the next/prev/first/last pages of a paginated listing.
"""

import re
import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional


logger = logging.getLogger(__name__)


@dataclass
class Link:
    """A single link of a Link header"""
    url: str
    rel: str
    params: Dict[str, str] = field(default_factory=dict)


class LinkHeaderParser:
    """
    Parser for ``Link`` header values such as::

        <https://api.github.com/...&page=2>; rel="next", <https://api.github.com/...&page=5>; rel="last"

    Links are keyed by relation. A link with several space separated
    relations (``rel="next last"``) is registered under each of them.
    """

    def __init__(self):
        """Initialize link header parser."""
        self.link_split_pattern = re.compile(r',\s*(?=<)')
        self.link_pattern = re.compile(r'^\s*<([^>]*)>\s*(.*)$')
        self.param_pattern = re.compile(r'^\s*([\w*-]+)\s*=\s*(?:"([^"]*)"|([^";,\s]+))\s*$')

    def parse(self, header: Optional[str]) -> Optional[Dict[str, Link]]:
        """
        Parse a Link header value.

        Args:
            header: Raw header value

        Returns:
            Mapping of relation name to Link, or None when the header is
            empty or not a valid Link header
        """
        if not header or not header.strip():
            return None

        links: Dict[str, Link] = {}
        for part in self.link_split_pattern.split(header.strip()):
            parsed = self._parse_link(part)
            if parsed is None:
                logger.debug(f"Unparsable link header segment: {part!r}")
                return None
            for link in parsed:
                links.setdefault(link.rel, link)

        return links

    def _parse_link(self, part: str) -> Optional[List[Link]]:
        match = self.link_pattern.match(part)
        if not match:
            return None

        url, rest = match.group(1).strip(), match.group(2)
        if not url:
            return None

        params: Dict[str, str] = {}
        for raw_param in rest.split(';')[1:]:
            param_match = self.param_pattern.match(raw_param)
            if not param_match:
                return None
            name = param_match.group(1).lower()
            value = param_match.group(2) if param_match.group(2) is not None else param_match.group(3)
            params[name] = value

        # anything before the first ';' must be blank
        if rest.split(';')[0].strip():
            return None

        rels = params.get('rel', '').split()
        if not rels:
            return None

        return [Link(url=url, rel=rel, params=params) for rel in rels]

    def next_url(self, header: Optional[str]) -> Optional[str]:
        """URL of the ``next`` relation, if the header has one"""
        links = self.parse(header)
        if links and 'next' in links:
            return links['next'].url
        return None
