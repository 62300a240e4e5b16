"""
Pricing Simulation Service

Gross-margin arithmetic for dishes: margin from a price, price from a
target margin, and the profit that results.
"""

# Margin suggested when a dish has no selling price yet
DEFAULT_DESIRED_MARGIN = 0.30


class PricingError(ValueError):
    """Raised when a target margin cannot produce a finite, positive price."""
    pass


def margin_from_price(selling_price, total_cost):
    """Gross margin as a fraction; 0.0 when the selling price is not positive."""
    selling_price = float(selling_price or 0)
    if selling_price <= 0:
        return 0.0
    return (selling_price - float(total_cost or 0)) / selling_price


def price_from_margin(total_cost, desired_margin):
    """
    Selling price that yields `desired_margin` over `total_cost`.

    Raises:
        PricingError: If desired_margin is outside [0, 1)
    """
    desired_margin = float(desired_margin)
    if desired_margin < 0:
        raise PricingError('Desired margin cannot be negative')
    # NaN fails every comparison, so test the range positively
    if not 0 <= desired_margin < 1:
        raise PricingError('Desired margin must be a number below 100%')
    return float(total_cost or 0) / (1 - desired_margin)


def profit(selling_price, total_cost):
    """Selling price minus cost; negative when the dish sells at a loss."""
    return float(selling_price or 0) - float(total_cost or 0)


def simulate(total_cost, desired_margin=None, selling_price=None):
    """
    Pricing panel figures for a cost.

    When selling_price is given, its current margin and profit are
    reported; suggested_price is always derived from desired_margin
    (or, if missing, the current margin when there is a price, else
    DEFAULT_DESIRED_MARGIN).
    """
    total_cost = float(total_cost or 0)

    current_margin = None
    current_profit = None
    if selling_price is not None:
        current_margin = margin_from_price(selling_price, total_cost)
        current_profit = profit(selling_price, total_cost)

    if desired_margin is None:
        if selling_price is not None and float(selling_price) > 0 and 0 <= current_margin < 1:
            desired_margin = current_margin
        else:
            desired_margin = DEFAULT_DESIRED_MARGIN

    suggested_price = price_from_margin(total_cost, desired_margin)

    return {
        'total_cost': total_cost,
        'selling_price': float(selling_price) if selling_price is not None else None,
        'margin': current_margin,
        'profit': current_profit,
        'desired_margin': float(desired_margin),
        'suggested_price': suggested_price,
        'suggested_profit': profit(suggested_price, total_cost),
    }
