"""fluri — immutable URIs with fluent builders and pluggable encoding.

Parse a string, transform it, render it back with correct
percent-encoding::

    from fluri import parse_uri

    uri = parse_uri("http://example.com/search?q=python")
    uri = uri.with_scheme("https").replace_params("q", "fluent uris")
    str(uri)  # "https://example.com/search?q=fluent%20uris"

Path segments carry matrix parameters::

    uri = parse_uri("http://example.com/maps;lat=51;lng=0")
    uri.matrix_params  # (("lat", "51"), ("lng", "0"))
"""

__version__ = "0.1.0.dev0"
__all__ = [
    "DEFAULT_CONFIG",
    "ChainedUriEncoder",
    "CharsetError",
    "ConfigurationError",
    "FluriError",
    "MatrixParams",
    "NoopDecoder",
    "NoopEncoder",
    "PathPart",
    "PercentDecoder",
    "PercentEncoder",
    "QueryString",
    "StringPathPart",
    "Uri",
    "UriConfig",
    "UriDecoder",
    "UriEncoder",
    "UriParser",
    "encode",
    "parse_uri",
    "path_part",
    "render_uri",
]

# public name -> defining module
_LAZY_IMPORTS: dict[str, str] = {
    "DEFAULT_CONFIG": "fluri.config",
    "UriConfig": "fluri.config",
    "ChainedUriEncoder": "fluri.encoding.encoder",
    "NoopEncoder": "fluri.encoding.encoder",
    "PercentEncoder": "fluri.encoding.encoder",
    "UriEncoder": "fluri.encoding.encoder",
    "encode": "fluri.encoding.encoder",
    "NoopDecoder": "fluri.encoding.decoder",
    "PercentDecoder": "fluri.encoding.decoder",
    "UriDecoder": "fluri.encoding.decoder",
    "CharsetError": "fluri.errors",
    "ConfigurationError": "fluri.errors",
    "FluriError": "fluri.errors",
    "MatrixParams": "fluri.path",
    "PathPart": "fluri.path",
    "StringPathPart": "fluri.path",
    "path_part": "fluri.path",
    "QueryString": "fluri.parameters",
    "Uri": "fluri.uri",
    "UriParser": "fluri.parser",
    "parse_uri": "fluri.conversions",
    "render_uri": "fluri.conversions",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import fluri`` fast while providing a clean top-level API.
    """
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is not None:
        import importlib

        return getattr(importlib.import_module(module_name), name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
