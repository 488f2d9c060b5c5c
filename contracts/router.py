from contracts.base import Base

class Router:
  def __init__(self, base: Base, address: str):
    self.address = address
    self.base = base

    self.instance = None

  async def __load_contracts(self):
    if self.instance is None:
      self.instance = await self.base.load_contract("router", self.address)

  async def get_amounts_out(self, amount_in: int, path: list[str]) -> list[int]:
    await self.__load_contracts()

    path = [self.base.web3.to_checksum_address(token) for token in path]
    amounts = await self.instance.functions.getAmountsOut(amount_in, path).call()
    return [int(amount) for amount in amounts]
