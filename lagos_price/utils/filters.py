from lagos_price.core.config import CURRENCY_SYMBOL


def comma(v, digits=0):
    if v is None:
        return "N/A"
    try:
        x = float(v)
        if digits and (x % 1 != 0):
            return f"{x:,.{digits}f}".rstrip("0").rstrip(".")
        return f"{int(round(x)):,}"
    except Exception:
        return str(v)


def naira(v, digits=2):
    if v is None:
        return "N/A"
    try:
        return f"{CURRENCY_SYMBOL}{comma(float(v), digits)}"
    except Exception:
        return str(v)
