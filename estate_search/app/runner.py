"""
One-shot map radius search from the command line.

Usage:
    estate-search --place "Bandra West" --radius 10
    estate-search --point 19.0760,72.8777 --radius 25
    estate-search --use_location
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys

from ..catalog import CatalogError, PropertyCatalog, format_ids, get_catalog, set_catalog
from ..geo.models import GeoPoint
from ..geocoding import PlaceResolver, PlaceResolverConfig
from ..location import IpLocationConfig, IpLocationProvider
from ..search import MapSearchConfig, MapSearchController, SearchState, SearchStatus
from .config import check_config, config_to_dict, get_config, parse_point, setup_logging

logger = logging.getLogger(__name__)


def build_controller(config: argparse.Namespace) -> MapSearchController:
    """Wire the controller from configuration."""
    if config.catalog_path is not None:
        set_catalog(PropertyCatalog.from_yaml(config.catalog_path))

    resolver = PlaceResolver(
        PlaceResolverConfig(
            url=config.geocoder_url,
            country_codes=config.geocoder_country,
            limit=config.geocoder_limit,
            timeout=config.geocoder_timeout,
        )
    )
    location = IpLocationProvider(IpLocationConfig(url=config.location_url))

    return MapSearchController(
        resolver=resolver,
        location_provider=location,
        catalog=get_catalog(),
        config=MapSearchConfig(
            default_radius_km=config.radius,
            location_timeout_seconds=config.location_timeout,
        ),
    )


def print_state(state: SearchState) -> None:
    """Print search results for the terminal."""
    if state.status is not SearchStatus.LOCATED or state.selection is None:
        print(f"ERROR: {state.message or 'No location selected'}", file=sys.stderr)
        return

    point = state.selection.point
    print(f"{state.count} properties within {state.radius_km:g} km of {point}")
    print()
    for prop in state.properties:
        beds = f"{prop.beds} bd / {prop.baths} ba"
        print(f"  [{prop.id:>3}] {prop.price:<10} {beds:<14} {prop.address}")
    if state.properties:
        print()
        print(f"Listing ids: {format_ids(state.properties)}")


async def run_search(
    controller: MapSearchController, config: argparse.Namespace
) -> SearchState:
    """Drive the controller through one search."""
    if config.point is not None:
        latitude, longitude = parse_point(config.point)
        return await controller.select_point(GeoPoint(latitude, longitude))

    if config.use_location:
        return await controller.use_my_location()

    state = await controller.search_place(config.place)
    if not state.candidates:
        return state

    print("Matching places:")
    for i, candidate in enumerate(state.candidates):
        marker = "*" if i == config.pick else " "
        print(f" {marker} {i}. {candidate.display_name}")
    print()

    if config.pick >= len(state.candidates):
        print(
            f"ERROR: --pick {config.pick} but only {len(state.candidates)} "
            f"candidates found",
            file=sys.stderr,
        )
        controller.close()
        return controller.state

    return await controller.select_candidate(config.pick)


async def main(args: list[str] | None = None) -> int:
    """CLI entry point."""
    config = get_config(args)
    setup_logging(config.log_level)

    try:
        check_config(config)
    except ValueError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 2

    logger.info(f"Config: {config_to_dict(config)}")

    try:
        controller = build_controller(config)
    except CatalogError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    try:
        state = await run_search(controller, config)
    finally:
        controller.close()

    print_state(state)
    return 0 if state.status is SearchStatus.LOCATED else 1


def run() -> None:
    """Console script entry point."""
    sys.exit(asyncio.run(main()))


if __name__ == "__main__":
    run()
