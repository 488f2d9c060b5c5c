from constants import DEX_NETWORK, REFERENCE_TOKENS, ROUTER_ADDRESSES, RATE_LIMIT_MAX_REQUESTS, RATE_LIMIT_WINDOW, \
  UNKNOWN_PRICE, Exchange, Network
from utils.rate_limiter import RateLimiter, RateLimitedError
from utils.units import format_units, parse_units
from utils.retry import retry_with_delay
from contracts.router import Router
from contracts.erc20 import ERC20
from contracts.base import Base
from config import rpc_url
import logging

logger = logging.getLogger(__name__)

class DexService:

  def __init__(self, rate_limiter: RateLimiter | None = None):
    if rate_limiter is None:
      rate_limiter = RateLimiter(RATE_LIMIT_MAX_REQUESTS, RATE_LIMIT_WINDOW)
    self.rate_limiter = rate_limiter
    self._connections: dict[Network, Base] = {}
    logger.info("DexService initialized")

  def connection(self, exchange: Exchange) -> Base:
    network = DEX_NETWORK[Exchange(exchange)]
    if network not in self._connections:
      self._connections[network] = Base(rpc_url(network))
      logger.info(f"{network.value.upper()} provider initialized")
    return self._connections[network]

  def quote_path(self, token_address: str, exchange: Exchange) -> list[str]:
    wrapped_native, stable = REFERENCE_TOKENS[DEX_NETWORK[Exchange(exchange)]]
    if token_address.lower() == stable.lower():
      return [token_address, wrapped_native]
    return [token_address, wrapped_native, stable]

  async def token_decimals(self, token_address: str, exchange: Exchange) -> int:
    return await ERC20(self.connection(exchange), token_address).decimals

  @retry_with_delay
  async def _quote(self, token_address: str, exchange: Exchange) -> str:
    if not self.rate_limiter.try_acquire(exchange):
      raise RateLimitedError(exchange.value)

    base = self.connection(exchange)
    _, stable = REFERENCE_TOKENS[DEX_NETWORK[exchange]]
    router = Router(base, ROUTER_ADDRESSES[exchange])
    path = self.quote_path(token_address, exchange)

    amount_in = parse_units("1", await self.token_decimals(token_address, exchange))
    amounts = await router.get_amounts_out(amount_in, path)
    stable_decimals = await self.token_decimals(stable, exchange)
    return format_units(amounts[len(path) - 1], stable_decimals)

  async def fetch_token_price(self, token_address: str, exchange: Exchange | str) -> str | None:
    exchange = Exchange(exchange)
    self.connection(exchange)
    return await self._quote(token_address, exchange)

  async def get_token_price(self, token_address: str, exchange: Exchange | str) -> str:
    price = await self.fetch_token_price(token_address, exchange)
    return UNKNOWN_PRICE if price is None else price

dex_service = DexService()
