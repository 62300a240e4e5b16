"""
Expense Summary Service

Totals used by the dashboard and to prefill the price advisor.
"""

import calendar
from datetime import date


def months_ago(today, months):
    """Same day `months` months before `today`, clamped to the month's length."""
    month_index = today.year * 12 + (today.month - 1) - months
    year, month = divmod(month_index, 12)
    month += 1
    day = min(today.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)


def summarize_expenses(expenses, since=None):
    """
    Aggregate expenses by type and category.

    Args:
        expenses: Iterable of Expense objects
        since: Optional date; older expenses are ignored

    Returns:
        Dict with fixed, variable, total, by_category and count
    """
    totals = {'fixed': 0.0, 'variable': 0.0}
    by_category = {}
    count = 0

    for expense in expenses:
        if since is not None and expense.date < since:
            continue
        amount = float(expense.amount or 0)
        totals[expense.type] = totals.get(expense.type, 0.0) + amount
        category = expense.category or 'Other'
        by_category[category] = by_category.get(category, 0.0) + amount
        count += 1

    return {
        'fixed': round(totals['fixed'], 2),
        'variable': round(totals['variable'], 2),
        'total': round(sum(totals.values()), 2),
        'by_category': {k: round(v, 2) for k, v in sorted(by_category.items())},
        'count': count,
        'since': since.isoformat() if since else None,
    }
