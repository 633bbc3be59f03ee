"""CLI commands for the Order aggregate."""

from __future__ import annotations

import click

from cactus_shop.application.dto import OrderItemRequest
from cactus_shop.domain.exceptions import DomainException
from cactus_shop.domain.model.order import ProductType
from cactus_shop.domain.model.value_objects import Address
from cactus_shop.infrastructure.bootstrap import in_memory_shop
from cactus_shop.infrastructure.cli.catalog_commands import seed_catalog


@click.command("demo")
@click.option("--cancel", is_flag=True, default=False, help="Cancel the order after confirming it.")
def demo(cancel: bool) -> None:
    """Walk one order through its whole lifecycle."""
    shop = in_memory_shop()
    seed_catalog(shop)

    cactus = shop.cacti.list_available_cacti()[0]
    fertilizer = shop.fertilizers.list_fertilizers()[0]

    try:
        customer = shop.customers.register_customer(
            "Ada Lovelace",
            "ada@example.com",
            "+442071234567",
            Address("12 Analytical Row", "London", "NW1 6XE"),
        ).unwrap()

        order = shop.orders.place_order(
            customer.id,
            [
                OrderItemRequest(cactus.id, ProductType.CACTUS, 2),
                OrderItemRequest(fertilizer.id, ProductType.FERTILIZER, 1),
            ],
        ).unwrap()
        click.echo(f"Order {order.id} placed  (status={order.status.value})")
        click.echo(f"Customer: {customer.name} <{customer.email}>")
        for item in order.items:
            click.echo(
                f"  {item.product_type.value:<11} x{item.quantity:<3} "
                f"{str(item.unit_price):>10} {str(item.total_price()):>10}"
            )
        click.echo(f"  {'Order Total':<26} {str(order.calculate_total_amount()):>10}")

        steps = [shop.orders.confirm_order]
        steps += [shop.orders.cancel_order] if cancel else [
            shop.orders.ship_order,
            shop.orders.deliver_order,
        ]
        for step in steps:
            order = step(order.id).unwrap()
            click.echo(f"Order {order.id} -> {order.status.value}")
    except DomainException as exc:
        raise click.ClickException(str(exc))
