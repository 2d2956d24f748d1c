from typing import Literal

type Coordinate = tuple[int, int]
type Thickness = int
type IsFocused = bool
type IsDisabled = bool
type ComponentType = Literal["button", "input", "textarea"]
type ComponentSize = Literal["sm", "md", "lg"]
type ComponentVariant = Literal["standard", "primary", "outline"]
type FontSize = Literal["standard", "title", "text", "mono"]
type RequestStatus = Literal["idle", "loading", "success", "error"]
type Severity = Literal["info", "success", "error"]
type HTTPMethod = Literal["GET", "POST", "PUT", "DELETE"]

__all__ = [
    "ComponentSize",
    "ComponentType",
    "ComponentVariant",
    "Coordinate",
    "FontSize",
    "HTTPMethod",
    "IsDisabled",
    "IsFocused",
    "RequestStatus",
    "Severity",
    "Thickness",
]
