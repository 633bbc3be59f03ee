"""CLI commands for the product catalog."""

from __future__ import annotations

import click

from cactus_shop.domain.model.cactus import CareLevel
from cactus_shop.domain.model.value_objects import Money
from cactus_shop.infrastructure.bootstrap import Shop, in_memory_shop

DEMO_CACTI = [
    ("Golden Barrel", "24.50", CareLevel.EASY, True),
    ("Bunny Ears", "12.00", CareLevel.EASY, True),
    ("Old Lady Cactus", "9.75", CareLevel.MEDIUM, True),
    ("Peyote", "48.00", CareLevel.HARD, False),
]

DEMO_FERTILIZERS = [
    ("Desert Bloom", "7.90", 250, [CareLevel.EASY, CareLevel.MEDIUM]),
    ("Succulent Boost", "11.25", 500, [CareLevel.MEDIUM, CareLevel.HARD]),
]


def seed_catalog(shop: Shop) -> None:
    """Fill an empty shop with the demo cacti and fertilizers."""
    for name, price, care_level, available in DEMO_CACTI:
        cactus = shop.cacti.create_cactus(name, Money.of(price), care_level).unwrap()
        if not available:
            shop.cacti.mark_as_unavailable(cactus.id).unwrap()
    for name, price, volume_ml, levels in DEMO_FERTILIZERS:
        shop.fertilizers.create_fertilizer(name, Money.of(price), volume_ml, levels).unwrap()


@click.command("catalog")
def catalog() -> None:
    """List the demo catalog."""
    shop = in_memory_shop()
    seed_catalog(shop)

    click.echo(f"{'Cactus':<20} {'Care':<8} {'Price':>10}  Status")
    click.echo("-" * 50)
    for cactus in sorted(shop.cacti.list_cacti(), key=lambda c: c.name):
        status = "available" if cactus.is_available else "sold out"
        click.echo(
            f"{cactus.name:<20} {cactus.care_level.value:<8} {str(cactus.price):>10}  {status}"
        )

    click.echo()
    click.echo(f"{'Fertilizer':<20} {'Volume':>8} {'Price':>10}  For")
    click.echo("-" * 60)
    for fertilizer in sorted(shop.fertilizers.list_fertilizers(), key=lambda f: f.name):
        levels = ", ".join(sorted(level.value for level in fertilizer.recommended_for))
        click.echo(
            f"{fertilizer.name:<20} {str(fertilizer.volume):>8} "
            f"{str(fertilizer.price):>10}  {levels}"
        )
