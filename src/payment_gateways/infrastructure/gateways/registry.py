"""
Gateway registry for looking up factories by gateway name.

PaymentService never compares gateway names; it receives a factory. The
registry is where a configured name (e.g. from settings) becomes a
factory, and the one place an unknown name is rejected.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from payment_gateways.domain.exceptions import UnsupportedGatewayError
from payment_gateways.domain.value_objects import normalize_gateway_name
from payment_gateways.infrastructure.gateways.base import ConfiguredGatewayFactory
from payment_gateways.infrastructure.gateways.mercadopago import MercadoPagoGatewayFactory
from payment_gateways.infrastructure.gateways.pagseguro import PagSeguroGatewayFactory
from payment_gateways.infrastructure.gateways.stripe import StripeGatewayFactory

if TYPE_CHECKING:
    from payment_gateways.application.ports import IdGenerator, OutputSink, TimeProvider

logger = structlog.get_logger(__name__)


class GatewayRegistry:
    """
    Registry mapping gateway names to concrete factory classes.

    Names are trimmed and case-insensitive. A registry starts with the three built-in
    gateways unless told otherwise.
    """

    def __init__(self, include_builtins: bool = True) -> None:
        self._factories: dict[str, type[ConfiguredGatewayFactory]] = {}
        if include_builtins:
            for factory_class in (
                PagSeguroGatewayFactory,
                MercadoPagoGatewayFactory,
                StripeGatewayFactory,
            ):
                self._factories[factory_class.family.value] = factory_class

    def create_factory(
        self,
        name: str,
        output_sink: OutputSink | None = None,
        id_generator: IdGenerator | None = None,
        time_provider: TimeProvider | None = None,
    ) -> ConfiguredGatewayFactory:
        """
        Create a gateway factory by name.

        Args:
            name: Gateway name (e.g., "stripe", "MercadoPago")
            output_sink: Where components write trace lines (defaults to stdout)
            id_generator: Token strategy for transaction IDs (defaults to UUID)
            time_provider: Clock for log timestamps (defaults to system clock)

        Returns:
            A factory whose components all belong to the named gateway

        Raises:
            UnsupportedGatewayError: If name is not registered
        """
        key = normalize_gateway_name(name)

        if key not in self._factories:
            available = ", ".join(self.list_gateways())
            raise UnsupportedGatewayError(
                f"Unsupported gateway: {name}. Available gateways: {available}"
            )

        factory_class = self._factories[key]
        logger.debug(
            "gateway_factory_created",
            gateway=key,
            factory_class=factory_class.__name__,
        )
        return factory_class(
            output_sink=output_sink,
            id_generator=id_generator,
            time_provider=time_provider,
        )

    def register_factory(
        self,
        name: str,
        factory_class: type[ConfiguredGatewayFactory],
    ) -> None:
        """
        Register a factory class under a gateway name.

        Re-registering a name replaces the previous factory.

        Raises:
            TypeError: If factory_class does not inherit from ConfiguredGatewayFactory
        """
        if not (
            isinstance(factory_class, type)
            and issubclass(factory_class, ConfiguredGatewayFactory)
        ):
            raise TypeError(f"{factory_class!r} must inherit from ConfiguredGatewayFactory")

        key = normalize_gateway_name(name)
        self._factories[key] = factory_class
        logger.info(
            "gateway_factory_registered",
            gateway=key,
            factory_class=factory_class.__name__,
        )

    def list_gateways(self) -> list[str]:
        """Registered gateway names, sorted."""
        return sorted(self._factories)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and normalize_gateway_name(name) in self._factories


# Registry used by the demo entrypoint
default_registry = GatewayRegistry()


def get_gateway_factory(
    name: str,
    output_sink: OutputSink | None = None,
    id_generator: IdGenerator | None = None,
    time_provider: TimeProvider | None = None,
) -> ConfiguredGatewayFactory:
    """
    Convenience function to create a factory from the default registry.

    Examples:
        factory = get_gateway_factory("stripe")
        service = PaymentService(factory, factory.output_sink)
    """
    return default_registry.create_factory(
        name,
        output_sink=output_sink,
        id_generator=id_generator,
        time_provider=time_provider,
    )
