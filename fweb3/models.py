# models.py
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Transaction(BaseModel):
    """A single explorer transfer record. Unknown upstream fields are dropped."""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    from_address: str = Field("", alias="from")
    to: Optional[str] = ""
    value: Optional[str] = None
    token_id: Optional[str] = Field(None, alias="tokenID")
    contract_address: Optional[str] = Field(None, alias="contractAddress")
    hash: Optional[str] = None


class ExplorerResponse(BaseModel):
    """Raw status/message/result envelope returned by the explorer API."""
    status: Optional[str] = None
    message: Optional[str] = None
    result: Union[List[Transaction], str, None] = None

    @property
    def is_ok(self) -> bool:
        return self.status == "1"

    @property
    def transactions(self) -> List[Transaction]:
        # List endpoints put error strings in `result` on failure
        if isinstance(self.result, list):
            return self.result
        return []

    @property
    def balance(self) -> Optional[str]:
        if isinstance(self.result, str):
            return self.result
        return None


class WalletTxTasks(BaseModel):
    has_used_fweb3_faucet: bool = False
    has_used_faucet: bool = False
    has_swapped_tokens: bool = False
    has_deployed_contract: bool = False
    has_voted_in_poll: bool = False


class ERC20Tasks(BaseModel):
    has_sent_tokens: bool = False
    has_burned_tokens: bool = False


class GameTaskState(BaseModel):
    """Quest progress for one wallet, serialised with camelCase keys."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    has_enough_tokens: bool = False
    has_used_faucet: bool = False
    has_used_fweb3_faucet: bool = False
    has_swapped_tokens: bool = False
    has_deployed_contract: bool = False
    has_voted_in_poll: bool = False
    has_sent_tokens: bool = False
    has_burned_tokens: bool = False
    has_minted_nft: bool = Field(False, alias="hasMintedNFT")
    has_won_game: bool = False
    token_balance: str = "0"
    trophy_id: Optional[str] = None
