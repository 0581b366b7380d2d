import logging
from typing import Any, Dict, Iterable, Mapping, Optional

from imgproxy_url.application.url.builder import ParamBuilder
from imgproxy_url.application.url.chain import chain
from imgproxy_url.application.url.options import BuildOptions, SignatureOptions
from imgproxy_url.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class GenerateUrlUseCase:
    """Build imgproxy URLs from declarative payloads.

    Payload fields not given by the caller fall back to the service defaults
    (base URL, locator mode, signing secrets), so clients never need to hold
    the signing key.
    """

    def __init__(
        self,
        *,
        base_url: Optional[str] = None,
        plain: bool = False,
        signature: Optional[SignatureOptions] = None,
    ) -> None:
        self._base_url = base_url
        self._plain = plain
        self._signature = signature

    @staticmethod
    def builder_from(modifiers: Iterable[Mapping[str, Any]]) -> ParamBuilder:
        builder = ParamBuilder()
        for call in modifiers:
            builder.apply(call["name"], *call.get("args", ()), **call.get("options", {}))
        return builder

    def execute(self, data: Mapping[str, Any]) -> Dict[str, str]:
        builder = self.builder_from(data.get("modifiers", []))
        url = builder.build(self._options_for(data))
        logger.info("Generated URL with %d modifiers", len(builder))
        return {"url": url}

    def execute_chain(self, data: Mapping[str, Any]) -> Dict[str, str]:
        builders = [self.builder_from(p.get("modifiers", [])) for p in data.get("pipelines", [])]
        url = chain(builders, build_options=self._options_for(data))
        logger.info("Generated chained URL with %d pipelines", len(builders))
        return {"url": url}

    def _options_for(self, data: Mapping[str, Any]) -> BuildOptions:
        # sign: None signs when secrets are configured, True requires them
        sign = data.get("sign")
        if sign and data.get("path") and self._signature is None:
            raise ConfigurationError(
                "Signing requested but IMGPROXY_KEY / IMGPROXY_SALT are not configured",
                config_key="imgproxy_key",
            )
        plain = data.get("plain")
        base_url = data.get("base_url")
        return BuildOptions(
            path=data.get("path"),
            base_url=base_url if base_url is not None else self._base_url,
            plain=self._plain if plain is None else plain,
            signature=None if sign is False else self._signature,
        )
