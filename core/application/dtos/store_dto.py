"""Application DTOs for store settings."""

from typing import Any, Dict, List, Optional, Union

from pydantic import ConfigDict, Field

from .base import CamelModel


class CheckoutMethodDTO(CamelModel):
    """A payment or shipping method as checkout sees it."""

    method: str
    label: str
    status: str = Field(..., description="Active | Inactive")


class StoreDTO(CamelModel):
    """Store with its normalized checkout configuration."""

    id: str
    name: str
    payment_methods: List[CheckoutMethodDTO] = Field(default_factory=list)
    shipping_methods: List[CheckoutMethodDTO] = Field(default_factory=list)


class StoreSettingsUpdate(CamelModel):
    """
    Store rename plus method lists.

    Lists must be JSON arrays of `{method, label, status}` objects or
    plain strings; omitted lists are left unchanged.
    """

    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., min_length=1)
    payment_methods: Optional[List[Union[Dict[str, Any], str]]] = None
    shipping_methods: Optional[List[Union[Dict[str, Any], str]]] = None
