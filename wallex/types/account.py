from pydantic import AliasChoices, Field

from wallex.types.base import BaseResponse, WallexModel


class Balance(WallexModel):
    """Balance of a single asset."""

    asset: str = ""
    fa_name: str = Field("", alias="faName")
    fiat: bool = False
    value: str = ""
    locked: str = ""


class Balances(WallexModel):
    balances: dict[str, Balance] = {}


class Wallets(BaseResponse):
    """Account balances keyed by asset.

    Accepts the payload under either ``result`` or ``results``.
    """

    result: Balances = Field(
        default_factory=Balances,
        validation_alias=AliasChoices("result", "results"),
    )
