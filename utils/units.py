from decimal import Decimal

def parse_units(value, decimals: int) -> int:
  scaled = Decimal(str(value)).scaleb(decimals)
  if scaled != scaled.to_integral_value():
    raise ValueError(f"{value} has more than {decimals} decimals")
  return int(scaled)

def format_units(amount: int, decimals: int) -> str:
  # (1500000, 6) -> "1.5", (10**6, 6) -> "1.0"
  amount = int(amount)
  sign = "-" if amount < 0 else ""
  whole, fraction = divmod(abs(amount), 10 ** decimals)
  fraction = str(fraction).rjust(decimals, "0").rstrip("0") if decimals > 0 else ""
  return f"{sign}{whole}.{fraction or '0'}"
