"""
Merchant - spends score on consumable items between levels
"""

import logging

from utils.constants import ITEM_KINDS, ITEM_PRICES

logger = logging.getLogger(__name__)


def get_price(kind):
    return ITEM_PRICES[kind]


def can_afford(score, kind):
    return score >= ITEM_PRICES[kind]


def buy_item(kind, score, inventory):
    """
    Buy one item

    Args:
        kind: Item kind ('shield', 'sword', 'pistol', 'drill')
        score: Current score
        inventory: Inventory to credit

    Returns:
        (bought, new_score) tuple; score is unchanged when not affordable

    Raises:
        KeyError: for an unknown item kind
    """
    if kind not in ITEM_KINDS:
        raise KeyError(f"unknown item: {kind}")

    price = ITEM_PRICES[kind]
    if score < price:
        return False, score

    inventory.add(kind)
    logger.info("Bought %s for %d (score %d -> %d)", kind, price, score, score - price)
    return True, score - price
