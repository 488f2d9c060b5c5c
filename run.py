from dex_service import dex_service
import logging
import asyncio

logging.basicConfig(level=logging.INFO)

TOKEN = "0x1f9840a85d5aF5bf1D1762F925BDADdC4201F984"  # UNI

async def main():
  price = await dex_service.get_token_price(TOKEN, "uniswap")
  print(f"Price of token on Uniswap: ${price}")

if __name__ == '__main__':
  asyncio.run(main())
