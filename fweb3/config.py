# config.py
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    POLYGON_API_KEY: Optional[str] = None
    POLYGON_API_URL: str = "https://api.polygonscan.com/api"
    HTTP_TIMEOUT: float = 30.0

    FWEB3_TOKEN_ADDRESS: str = "0x4a14ac36667b574b08443a15093e417db909d7a3"
    FWEB3_TOKEN_DECIMALS: int = 18
    FWEB3_NFT_ADDRESS: str = "0x8Fb79E65Fc1f5Ab2c34A1B2c1b5b6e8c6d11FE77"
    FWEB3_TROPHY_ADDRESS: str = "0x2a0D7311fA7e9aC2890CFd8219b2dEf0c206E79B"

    # Minting transfers originate from the zero address
    GENESIS_ADDRESS: str = "0x0000000000000000000000000000000000000000"
    FAUCET_ADDRESSES: List[str] = [
        "0x32Ba7ef7B2aB4D2D4F8e9A9a2f0b5b2f9c1eE6d1",
        "0x67806adca0fD8825DA9cddC69b9bA8837a64874b",
    ]
    SWAP_ROUTER_ADDRESS: str = "0xE592427A0AEce92De3Edee1F18E0157C05861564"
    POLL_ADDRESS: str = "0x718ad63ab0ff87c8c8b4da4d2e6c0d6c15fdb9f4"
    BURN_ADDRESS: str = "0x000000000000000000000000000000000000dEaD"

    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"
        extra = "ignore"


SENT_TOKENS_THRESHOLD = 100 * 10 ** 18
MIN_TOKEN_BALANCE = 100

DEFAULT_WON_GAME_STATE: Dict[str, bool] = {
    "has_enough_tokens": True,
    "has_used_faucet": True,
    "has_used_fweb3_faucet": True,
    "has_swapped_tokens": True,
    "has_deployed_contract": True,
    "has_voted_in_poll": True,
    "has_sent_tokens": True,
    "has_burned_tokens": True,
    "has_minted_nft": True,
}


@dataclass(frozen=True)
class GameConstants:
    """Known quest addresses (lower-cased) and thresholds."""
    genesis_address: str
    faucet_addresses: Tuple[str, ...]
    swap_router_address: str
    poll_address: str
    burn_address: str
    sent_tokens_threshold: int = SENT_TOKENS_THRESHOLD
    min_token_balance: int = MIN_TOKEN_BALANCE
    won_game_state: Tuple[Tuple[str, bool], ...] = field(
        default=tuple(DEFAULT_WON_GAME_STATE.items())
    )

    @classmethod
    def from_settings(cls, settings: Settings) -> "GameConstants":
        return cls(
            genesis_address=settings.GENESIS_ADDRESS.lower(),
            faucet_addresses=tuple(a.lower() for a in settings.FAUCET_ADDRESSES),
            swap_router_address=settings.SWAP_ROUTER_ADDRESS.lower(),
            poll_address=settings.POLL_ADDRESS.lower(),
            burn_address=settings.BURN_ADDRESS.lower(),
        )


settings = Settings()
GAME_CONSTANTS = GameConstants.from_settings(settings)
