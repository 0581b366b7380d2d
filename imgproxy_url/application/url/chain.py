from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Sequence, Tuple, Union

from imgproxy_url.application.url.builder import ParamBuilder, assemble_url
from imgproxy_url.application.url.options import BuildOptions
from imgproxy_url.core.exceptions import InvalidParameterError

logger = logging.getLogger(__name__)

# Pipelines are separated by "-" as a path segment of its own
PIPELINE_SEPARATOR = "/-/"


@dataclass(frozen=True, slots=True)
class ChainInput:
    """Builders to chain plus the options applied once to the combined pipeline."""

    builders: Tuple[ParamBuilder, ...]
    build_options: Optional[BuildOptions] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "builders", tuple(self.builders))
        if self.build_options is not None:
            object.__setattr__(self, "build_options", BuildOptions.coerce(self.build_options))


def chain(
    pipelines: Union[Sequence[ParamBuilder], ChainInput],
    *,
    build_options: Union[BuildOptions, Mapping[str, Any], None] = None,
) -> str:
    """Chain several pipelines into one imgproxy path.

    Each builder contributes its modifier segment only. When build options
    are given (via ``ChainInput`` or the keyword) the locator, signature and
    base URL are applied once to the whole chain, so at most one signature is
    computed regardless of the number of pipelines.
    """
    if isinstance(pipelines, ChainInput):
        builders = pipelines.builders
        if build_options is None:
            build_options = pipelines.build_options
    else:
        builders = tuple(pipelines)

    if not builders:
        raise InvalidParameterError("chain requires at least one pipeline", "chain")

    segments = [builder.build() for builder in builders]
    for index, segment in enumerate(segments):
        if not segment:
            raise InvalidParameterError(f"pipeline {index} has no modifiers", "chain")

    joined = PIPELINE_SEPARATOR.join(segments)
    logger.debug("Chained %d pipelines", len(builders))
    if build_options is None:
        return joined
    return assemble_url((joined,), BuildOptions.coerce(build_options))
