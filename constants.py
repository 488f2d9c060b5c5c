from enum import Enum

class Exchange(str, Enum):
  UNISWAP = "uniswap"
  SUSHISWAP = "sushiswap"
  PANCAKESWAP = "pancakeswap"

class Network(str, Enum):
  ETHEREUM = "ethereum"
  BSC = "bsc"

ROUTER_ADDRESSES = {
  Exchange.UNISWAP: "0x7a250d5630B4cF539739dF2C5dAcb4c659F2488D",
  Exchange.SUSHISWAP: "0xd9e1cE17f2641f24aE83637ab66a2cca9C378B9F",
  Exchange.PANCAKESWAP: "0x10ED43C718714eb63d5aA57B78B54704E256024E",
}

DEX_NETWORK = {
  Exchange.UNISWAP: Network.ETHEREUM,
  Exchange.SUSHISWAP: Network.ETHEREUM,
  Exchange.PANCAKESWAP: Network.BSC,
}

WETH = "0xC02aaA39b223FE8D0A0e5C4F27eAD9083C756Cc2"
USDC = "0xA0b86991c6218b36c1d19D4a2e9Eb0cE3606eB48"
WBNB = "0xbb4CdB9CBd36B01bD1cBaEBF2De08d9173bc095c"
BSC_USDC = "0x8AC76a51cc950d9822D68b83fE1Ad97B32Cd580d"

# (wrapped native, stable) per network
REFERENCE_TOKENS = {
  Network.ETHEREUM: (WETH, USDC),
  Network.BSC: (WBNB, BSC_USDC),
}

RATE_LIMIT_MAX_REQUESTS = 5
RATE_LIMIT_WINDOW = 1.0  # seconds
MAX_ATTEMPTS = 5

UNKNOWN_PRICE = "0"
