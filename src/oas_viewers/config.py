"""Options controlling how viewers and the schema around them are built."""

from pydantic import BaseModel


class ViewerOptions(BaseModel):
    strict: bool = False  # raise on the first warning
    viewer: bool = True  # wrap authenticated operations in viewers
    placeholder_field: str = "placeholder"
