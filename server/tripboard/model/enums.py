from enum import Enum


class Vehicle(str, Enum):
    """How the group travels during the trip."""
    CAR = "car"
    PUBLIC_TRANSPORTATION = "public_transportation"
    BICYCLE = "bicycle"
    WALK = "walk"


class DestinationName(str, Enum):
    SEOUL = "seoul"
    BUSAN = "busan"
    INCHEON = "incheon"
    GANGNEUNG = "gangneung"
    GYEONGJU = "gyeongju"
    JEONJU = "jeonju"
    YEOSU = "yeosu"
    JEJU = "jeju"


class Gender(str, Enum):
    MALE = "male"
    FEMALE = "female"
