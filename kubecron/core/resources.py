"""Resolution of artifact references to container image identifiers."""

import re

from .errors import ResourceResolutionError

DOCKER_SCHEME = "docker"

_SCHEME_PATTERN = re.compile(r"^(?P<scheme>[A-Za-z][A-Za-z0-9+.\-]*):(?P<rest>.*)$")


def resolve_image(resource: str) -> str:
    """Resolve a resource URI to the image identifier it points at.

    Only ``docker:`` references describe a container image; the image is
    the scheme-specific part of the URI, so ``docker:repo/img:latest``
    resolves to ``repo/img:latest``.

    Args:
        resource: URI-like reference from a schedule request.

    Returns:
        The image identifier.

    Raises:
        ResourceResolutionError: If the reference has no scheme, is not a
            docker reference, or names no image.
    """
    if not resource or not resource.strip():
        raise ResourceResolutionError("Unable to get URI for empty resource", resource)

    match = _SCHEME_PATTERN.match(resource.strip())
    if match is None:
        raise ResourceResolutionError(f"Unable to get URI for {resource}", resource)

    scheme = match.group("scheme").lower()
    if scheme != DOCKER_SCHEME:
        raise ResourceResolutionError(
            f"Unsupported resource scheme '{scheme}' for {resource}, "
            f"expected '{DOCKER_SCHEME}'",
            resource,
        )

    image = match.group("rest")
    if image.startswith("//"):
        image = image[2:]
    if not image:
        raise ResourceResolutionError(f"No image in resource {resource}", resource)

    return image
