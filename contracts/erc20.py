from contracts.base import Base

class ERC20:
  def __init__(self, base: Base, address: str):
    self.address = address
    self.base = base

    self.instance = None

  async def __load_contracts(self):
    if self.instance is None:
      self.instance = await self.base.load_contract("erc20", self.address)

  @property
  async def decimals(self) -> int:
    await self.__load_contracts()

    result = await self.instance.functions.decimals().call()
    return int(result)
