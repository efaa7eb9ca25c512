"""Lenient URI parser.

Scans the raw text left to right and never raises: anything it cannot
make sense of ends up as an absent field or stays literal. Splitting
happens on the raw text, and every extracted token is decoded afterwards,
so ``%23`` in a query value stays in the query while a raw ``#`` always
starts the fragment.

Grammar handled::

    uri       := [scheme "://"] ["//" authority] path ["?" query] ["#" fragment]
    authority := [userinfo "@"] host [":" port]
    path      := ("/" segment)*     segment := name (";" key "=" value)*
    query     := pair ("&" pair)*   pair    := key ["=" value]
"""

import logging
import re

from fluri._internal.types import Param, Params
from fluri.encoding.decoder import PercentDecoder, UriDecoder
from fluri.parameters import QueryString
from fluri.path import PathPart, path_part
from fluri.uri import Uri

logger = logging.getLogger("fluri.parser")

# Longer digit runs are treated as part of the host
_PORT = re.compile(r"[0-9]{1,10}")
_AUTHORITY_END = re.compile(r"[/?#]")


def _split_pair(piece: str) -> tuple[str, str]:
    """Split ``key=value`` on the first ``=``; a missing ``=`` means ``""``."""
    key, _, value = piece.partition("=")
    return key, value


class UriParser:
    """Single-use scanner over one raw URI string.

    Usage::

        uri = UriParser("http://example.com/a;v=1?q=x#top", PercentDecoder()).parse()
    """

    __slots__ = ("_decoder", "_text")

    def __init__(self, text: str, decoder: UriDecoder) -> None:
        self._text = text
        self._decoder = decoder

    def parse(self) -> Uri:
        rest = self._text

        protocol, rest = self._scheme(rest)

        user = password = host = None
        port = None
        if rest.startswith("//"):
            end = _AUTHORITY_END.search(rest, 2)
            stop = end.start() if end else len(rest)
            user, password, host, port = self._authority(rest[2:stop])
            rest = rest[stop:]

        rest, hash_sign, fragment = rest.partition("#")
        path, _, query = rest.partition("?")

        return Uri(
            protocol=protocol,
            user=user,
            password=password,
            host=host,
            port=port,
            path_parts=self._path(path),
            query=self._query(query),
            fragment=self._decode(fragment) if hash_sign else None,
        )

    def _decode(self, token: str) -> str:
        try:
            return self._decoder.decode(token)
        except ValueError:
            logger.debug("Keeping undecodable token %r", token)
            return token

    def _scheme(self, text: str) -> tuple[str | None, str]:
        """Split off ``scheme://`` and return ``(scheme, "//...")``."""
        if text.startswith("//"):
            return None, text
        idx = text.find("://")
        if idx <= 0 or _AUTHORITY_END.search(text, 0, idx):
            return None, text
        return self._decode(text[:idx]), text[idx + 1 :]

    def _authority(self, text: str) -> tuple[str | None, str | None, str | None, int | None]:
        user = password = None
        user_info, at_sign, host_port = text.rpartition("@")
        if at_sign:
            raw_user, colon, raw_password = user_info.partition(":")
            user = self._decode(raw_user)
            password = self._decode(raw_password) if colon else None

        port = None
        host_text, colon, port_text = host_port.rpartition(":")
        if colon and _PORT.fullmatch(port_text):
            port = int(port_text)
        else:
            if colon:
                logger.debug("No numeric port in %r; treating it all as host", host_port)
            host_text = host_port

        host = self._decode(host_text) if host_text else None
        return user, password, host, port

    def _path(self, text: str) -> tuple[PathPart, ...]:
        parts: list[PathPart] = []
        for segment in text.split("/"):
            if not segment:
                continue
            name, *raw_params = segment.split(";")
            params: list[Param] = []
            for piece in raw_params:
                if not piece:
                    continue
                key, value = _split_pair(piece)
                params.append((self._decode(key), self._decode(value)))
            parts.append(path_part(self._decode(name), params))
        return tuple(parts)

    def _query(self, text: str) -> QueryString:
        params: Params = tuple(
            (self._decode(key), self._decode(value))
            for key, value in (_split_pair(piece) for piece in text.split("&") if piece)
        )
        return QueryString(params)


def parse(text: str, decoder: UriDecoder | None = None) -> Uri:
    """Parse *text* into a ``Uri``. Never raises for any input string.

    *decoder* defaults to ``PercentDecoder()`` (UTF-8).
    """
    if decoder is None:
        decoder = PercentDecoder()
    return UriParser(text, decoder).parse()
