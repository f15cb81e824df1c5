"""HTML template for recipe cards.

Renders the card list that fills the recipe container, or the
empty-state message when nothing matches.
"""

from html import escape

EMPTY_STATE_MESSAGE = "No recipes found matching your criteria. Try a different filter!"


def format_recipe_card(recipe) -> str:
    """Create HTML for a single recipe card.

    Args:
        recipe: Recipe record

    Returns:
        HTML string for one <article> card
    """
    title = escape(recipe.title)
    difficulty = escape(recipe.difficulty.value)

    return f'''
        <article class="recipe-card" data-id="{recipe.id}">
            <img src="{escape(recipe.image)}" alt="{title}" class="recipe-image">
            <div class="recipe-content">
                <div class="recipe-header">
                    <span class="recipe-category">{escape(recipe.category)}</span>
                    <h2 class="recipe-title">{title}</h2>
                </div>
                <p class="recipe-description">{escape(recipe.description)}</p>
                <div class="recipe-meta">
                    <div class="meta-item">
                        <span class="meta-icon">&#9201;&#65039;</span>
                        <span>{recipe.time} min</span>
                    </div>
                    <span class="difficulty {difficulty}">{difficulty}</span>
                </div>
            </div>
        </article>
    '''


def format_empty_state() -> str:
    return f'''
        <div class="empty-state">
            <p>{EMPTY_STATE_MESSAGE}</p>
        </div>
    '''


def format_recipe_list(view) -> str:
    """Cards for every recipe in ``view``, in order, or the empty state."""
    if not view:
        return format_empty_state()
    return ''.join(format_recipe_card(recipe) for recipe in view)


def render_recipes(view, surface) -> None:
    """Replace the surface's content with the rendered ``view``."""
    surface.set_content(format_recipe_list(view))
