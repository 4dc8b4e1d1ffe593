import sys

from fridgechef.core.engine_config import load_engine_config
from fridgechef.core.logging_config import setup_logging
from fridgechef.factory import create_engine
from fridgechef.services.sources.local import LocalSource


def main(argv=None):
    """Rank the local recipe file against the fridge items given on the command line."""
    setup_logging()
    fridge = list(argv if argv is not None else sys.argv[1:])
    if not fridge:
        raise SystemExit("usage: python scripts/rank_fridge_recipes.py <ingredient> [<ingredient> ...]")

    config = load_engine_config()
    engine = create_engine(config)
    recipes = LocalSource(config.recipes_path).get_recipes()

    ranked = engine.rank(recipes, fridge)
    for item in ranked:
        reasons = ", ".join(item.reasons) or "-"
        print(f"{item.personal_score:6.2f}  {item.recipe.title or item.id}  ({reasons})")

    suggestions = engine.suggest_ingredients(fridge)
    if suggestions:
        print(f"\nYou might also pick up: {', '.join(suggestions)}")


if __name__ == "__main__":
    main()
