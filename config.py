from dotenv import load_dotenv
from constants import Network
import logging
import os

load_dotenv()

logger = logging.getLogger(__name__)

INFURA_API_KEY = os.getenv("INFURA_API_KEY")
ETHEREUM_RPC = os.getenv("ETHEREUM_RPC")
BSC_RPC = os.getenv("BSC_RPC", "https://bsc-dataseed.binance.org/")

def rpc_url(network: Network) -> str:
  network = Network(network)
  if network is Network.BSC:
    return BSC_RPC

  if ETHEREUM_RPC:
    return ETHEREUM_RPC
  if not INFURA_API_KEY:
    logger.warning("INFURA_API_KEY is not set, ethereum requests will fail")
  return f"https://mainnet.infura.io/v3/{INFURA_API_KEY}"
