from web3 import AsyncWeb3, AsyncHTTPProvider
import aiofiles
import logging
import json
import os

logger = logging.getLogger(__name__)

class Base:
  def __init__(self, rpc: str):
    self.web3 = AsyncWeb3(AsyncHTTPProvider(rpc))
    self._abis: dict[str, list] = {}

  async def load_abi(self, name: str) -> list:
    if name not in self._abis:
      path = f"{os.path.dirname(os.path.dirname(os.path.abspath(__file__)))}/assets/"
      async with aiofiles.open(os.path.abspath(path + f"{name}.abi")) as f:
        self._abis[name] = json.loads(await f.read())
    return self._abis[name]

  async def load_contract(self, abi_name, address):
    address = self.web3.to_checksum_address(address)
    return self.web3.eth.contract(address=address, abi=await self.load_abi(abi_name))
