"""
AI Price Advisor

Asks Google's Generative Language API for a suggested price range and
the reasoning behind it. The answer is passed through as text; nothing
here checks whether the range is sensible.
"""

import json
import logging

import requests

logger = logging.getLogger(__name__)

ADVISOR_FIELDS = (
    'ingredientCosts',
    'fixedExpensesLast3Months',
    'variableExpensesLast3Months',
    'unitsSoldLast3Months',
    'desiredProfitMargin',
)

PROMPT_TEMPLATE = """You are a financial advisor for a restaurant. Based on the costs of ingredients, fixed costs, variable costs, units sold, and desired profit margin, suggest a price range for a recipe.

Ingredient Costs: {ingredientCosts}
Fixed Expenses (Last 3 Months): {fixedExpensesLast3Months}
Variable Expenses (Last 3 Months): {variableExpensesLast3Months}
Units Sold (Last 3 Months): {unitsSoldLast3Months}
Desired Profit Margin: {desiredProfitMargin}

Consider all these factors carefully and provide a suggested price range and reasoning.
Answer with a JSON object with exactly two string fields: "suggestedPriceRange" and "reasoning"."""


class AdvisorError(Exception):
    """Raised when the price advisor cannot produce an answer."""
    pass


def build_prompt(inputs):
    """Fill the advisor prompt with the five pricing inputs."""
    return PROMPT_TEMPLATE.format(**{field: inputs[field] for field in ADVISOR_FIELDS})


def _extract_text(payload):
    try:
        parts = payload['candidates'][0]['content']['parts']
    except (KeyError, IndexError, TypeError):
        raise AdvisorError('Advisor returned no candidates')
    return ''.join(part.get('text', '') for part in parts)


def _parse_answer(text):
    """Parse the model's JSON answer, tolerating a ```json fenced block."""
    cleaned = text.strip()
    if cleaned.startswith('```'):
        cleaned = cleaned.strip('`')
        if cleaned.lower().startswith('json'):
            cleaned = cleaned[4:]
    try:
        answer = json.loads(cleaned)
    except ValueError:
        raise AdvisorError('Advisor answer is not valid JSON')

    if not isinstance(answer, dict):
        raise AdvisorError('Advisor answer is not an object')
    range_text = answer.get('suggestedPriceRange')
    reasoning = answer.get('reasoning')
    if not isinstance(range_text, str) or not isinstance(reasoning, str):
        raise AdvisorError('Advisor answer is missing fields')
    return {'suggestedPriceRange': range_text, 'reasoning': reasoning}


def suggest_price(inputs, api_key, model='gemini-2.5-flash',
                  base_url='https://generativelanguage.googleapis.com/v1beta', timeout=30):
    """
    Request a price suggestion from the generative model.

    Args:
        inputs: Dict with the ADVISOR_FIELDS keys
        api_key: Google API key
        model: Model name
        base_url: API root
        timeout: Request timeout in seconds

    Returns:
        {"suggestedPriceRange": str, "reasoning": str}

    Raises:
        AdvisorError: For a missing key, network errors, non-2xx answers
            or an unreadable response. No retry is attempted.
    """
    if not api_key:
        raise AdvisorError('Price advisor is not configured')

    url = f"{base_url.rstrip('/')}/models/{model}:generateContent"
    body = {
        'contents': [{'role': 'user', 'parts': [{'text': build_prompt(inputs)}]}],
        'generationConfig': {'responseMimeType': 'application/json'},
    }

    try:
        response = requests.post(
            url,
            params={'key': api_key},
            json=body,
            timeout=timeout,
        )
        response.raise_for_status()
        payload = response.json()
    except requests.RequestException as e:
        logger.error("Price advisor request failed: %s", e)
        raise AdvisorError('Price advisor request failed') from e
    except ValueError as e:
        raise AdvisorError('Advisor response is not JSON') from e

    return _parse_answer(_extract_text(payload))
