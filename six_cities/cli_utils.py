"""
CLI Utilities Library

Shared defaults and console output helpers used across CLI commands.
"""

import math
import click
from typing import Optional

from .models import Offer


# Constants
FLAG_PREFIX = '--'
DEFAULT_COMMAND = '--help'
DEFAULT_VERSION_FILE = './package.json'


def echo_error(message: str, details: Optional[str] = None) -> None:
    """
    Print an error line, and optionally its details, to stderr.

    Args:
        message: Short context line
        details: Underlying error message
    """
    click.secho(f"❌ {message}", fg='red', err=True)
    if details:
        click.secho(f"   Details: {details}", fg='red', err=True)


def format_value(value) -> str:
    """Render a decoded field for display, marking missing and NaN values"""
    if value is None:
        return "N/A"
    if isinstance(value, float) and math.isnan(value):
        return "NaN"
    return str(value)


def print_detailed_offer(offer: Offer, index: int) -> None:
    """
    Print detailed information for a single offer.

    Args:
        offer: Decoded offer to display
        index: Offer index number
    """
    data = offer.to_dict()
    click.echo(f"{index}. {click.style(format_value(data['title']), bold=True)}")
    click.echo(f"   City: {format_value(data['city'])}")
    click.echo(f"   Posted: {format_value(data['postDate'])}")
    click.echo(f"   Type: {format_value(data['type'])}")
    click.echo(f"   Price: {format_value(data['price'])}")
    click.echo(f"   Rating: {format_value(data['rating'])}")
    click.echo(f"   Bedrooms/Guests: {format_value(data['bedrooms'])}/{format_value(data['maxGuests'])}")
    click.echo(f"   Premium: {format_value(data['isPremium'])}  Favorite: {format_value(data['isFavorite'])}")

    if data['description']:
        click.echo(f"   Description: {data['description']}")
    click.echo(f"   Preview: {format_value(data['previewImage'])}")
    if data['images']:
        click.echo(f"   Images: {', '.join(data['images'])}")
    if data['amenities']:
        click.echo(f"   Amenities: {', '.join(data['amenities'])}")

    author = data['author']
    if author:
        click.echo(f"   Author: {format_value(author['name'])} <{format_value(author['email'])}> ({format_value(author['type'])})")
        click.echo(f"   Avatar: {format_value(author['avatarUrl'])}")

    location = data['location']
    if location:
        click.echo(f"   Location: {format_value(location['latitude'])}, {format_value(location['longitude'])}")
    click.echo(f"   Comments: {format_value(data['commentCount'])}")
    click.echo()
