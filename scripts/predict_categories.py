#!/usr/bin/env python3
"""
Show category/emoji predictions for product names (no database).

Usage:
    python scripts/predict_categories.py <name> [<name> ...]

Example:
    python scripts/predict_categories.py Appels "Jonge kaas" Sinaasappelsap Wc-papier
"""
import sys
import os

# Add parent directory to path so we can import modules
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from lijstje.common.logging_config import configure_logging
from lijstje.domain.classification import is_fruit, predict_category_and_emoji


def main():
    if len(sys.argv) < 2:
        print("Usage: python scripts/predict_categories.py <name> [<name> ...]")
        sys.exit(1)

    configure_logging(json=False)

    print('='*60)
    for name in sys.argv[1:]:
        prediction = predict_category_and_emoji(name)
        print(f'{prediction.emoji}  {name}')
        print(f'    → Category: {prediction.category_name}')
        print(f'    → Matched term: {prediction.matched_term or "-"}')
        if prediction.category_name == "Fruit & Groente":
            print(f'    → Sorts as: {"fruit" if is_fruit(name) else "groente"}')
    print('='*60)


if __name__ == "__main__":
    main()
