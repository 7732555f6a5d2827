import re

_ABSOLUTE_URL = re.compile(r"^[a-zA-Z][a-zA-Z0-9+.-]*://")


def join_url(base_url: str, resource: str) -> str:
    """Join a base address and a resource path with exactly one slash.

    An absolute resource URL is returned unchanged, as is any resource when
    the base address is empty.

    Examples:
        >>> join_url("https://example.test", "items")
        'https://example.test/items'
        >>> join_url("https://example.test/v1/", "/items?q=1")
        'https://example.test/v1/items?q=1'
    """
    resource = resource or ""
    if not base_url or _ABSOLUTE_URL.match(resource):
        return resource
    if not resource:
        return base_url
    return f"{base_url.rstrip('/')}/{resource.lstrip('/')}"
