from dataclasses import dataclass


@dataclass(frozen=True)
class Endpoint:
    label: str
    path: str
    description: str
    paginated: bool = False  # sends ?limit= and renders as a history list
