"""Type aliases shared by the data models."""
from typing import Union

JSONValueType = Union[str, int, float, bool, None]
JSONArrayType = list["JSONType"]
JSONObjectType = dict[str, "JSONType"]
JSONType = Union[JSONValueType, JSONArrayType, JSONObjectType]
