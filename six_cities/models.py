from dataclasses import dataclass
from typing import Optional, List, Union, Dict, Any
from datetime import datetime
from enum import Enum


class CityName(str, Enum):
    Paris = "Paris"
    Cologne = "Cologne"
    Brussels = "Brussels"
    Amsterdam = "Amsterdam"
    Hamburg = "Hamburg"
    Dusseldorf = "Dusseldorf"


class PropertyType(str, Enum):
    Apartment = "apartment"
    House = "house"
    Room = "room"
    Hotel = "hotel"


class Amenity(str, Enum):
    Breakfast = "Breakfast"
    AirConditioning = "Air conditioning"
    LaptopFriendlyWorkspace = "Laptop friendly workspace"
    BabySeat = "Baby seat"
    Washer = "Washer"
    Towels = "Towels"
    Fridge = "Fridge"


class UserType(str, Enum):
    Standard = "обычный"
    Pro = "pro"


# int fields degrade to float('nan') on bad input
Number = Union[int, float]


@dataclass
class Location:
    """Geographic coordinates of an offer"""
    latitude: Optional[float]
    longitude: Optional[float]


@dataclass
class User:
    """Author of an offer"""
    name: Optional[str]
    email: Optional[str]
    avatar_url: Optional[str]
    password: Optional[str] = None
    type: Optional[Union[UserType, str]] = None


@dataclass
class Offer:
    """Data model for a rental offer"""
    title: Optional[str] = None
    description: Optional[str] = None
    post_date: Optional[datetime] = None
    city: Optional[Union[CityName, str]] = None
    preview_image: Optional[str] = None
    images: Optional[List[str]] = None
    is_premium: Optional[bool] = None
    is_favorite: Optional[bool] = None
    rating: Optional[float] = None
    type: Optional[Union[PropertyType, str]] = None
    bedrooms: Optional[Number] = None
    max_guests: Optional[Number] = None
    price: Optional[Number] = None
    amenities: Optional[List[Union[Amenity, str]]] = None
    author: Optional[User] = None
    comment_count: Optional[Number] = None
    location: Optional[Location] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert offer to plain values for display"""
        return {
            "title": self.title,
            "description": self.description,
            "postDate": self.post_date.isoformat() if self.post_date else None,
            "city": _enum_value(self.city),
            "previewImage": self.preview_image,
            "images": self.images,
            "isPremium": self.is_premium,
            "isFavorite": self.is_favorite,
            "rating": self.rating,
            "type": _enum_value(self.type),
            "bedrooms": self.bedrooms,
            "maxGuests": self.max_guests,
            "price": self.price,
            "amenities": [_enum_value(a) for a in self.amenities] if self.amenities is not None else None,
            "author": {
                "name": self.author.name,
                "email": self.author.email,
                "avatarUrl": self.author.avatar_url,
                "password": self.author.password,
                "type": _enum_value(self.author.type),
            } if self.author else None,
            "commentCount": self.comment_count,
            "location": {
                "latitude": self.location.latitude,
                "longitude": self.location.longitude,
            } if self.location else None,
        }


def _enum_value(value):
    if isinstance(value, Enum):
        return value.value
    return value
