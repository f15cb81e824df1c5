"""Full-page HTML for the recipe browser."""

from html import escape

PAGE_TITLE = "RecipeJS - Functional Cooking Companion"

PAGE_STYLE = '''
    body { font-family: system-ui; margin: 0; background: #faf7f2; color: #333; }
    header { padding: 2rem 1.5rem 1rem; text-align: center; }
    header h1 { margin: 0 0 0.5rem; }
    .controls { display: flex; flex-wrap: wrap; gap: 1.5rem; justify-content: center; padding: 0 1.5rem 1.5rem; }
    .control-group { display: flex; flex-wrap: wrap; gap: 0.5rem; align-items: center; }
    .control-group form { margin: 0; }
    .control-label { font-weight: 600; margin-right: 0.25rem; }
    .filter-btn, .sort-btn { padding: 0.5rem 1rem; border: 1px solid #ccc; border-radius: 999px; background: white; cursor: pointer; font-size: 14px; }
    .filter-btn.active, .sort-btn.active { background: #e76f51; border-color: #e76f51; color: white; }
    #recipe-container { display: grid; grid-template-columns: repeat(auto-fill, minmax(280px, 1fr)); gap: 1.5rem; padding: 0 1.5rem 2rem; max-width: 1200px; margin: 0 auto; }
    .recipe-card { background: white; border-radius: 12px; overflow: hidden; box-shadow: 0 2px 8px rgba(0,0,0,0.08); }
    .recipe-image { width: 100%; height: 200px; object-fit: cover; display: block; }
    .recipe-content { padding: 1rem; }
    .recipe-category { font-size: 12px; text-transform: uppercase; letter-spacing: 0.05em; color: #888; }
    .recipe-title { margin: 0.25rem 0 0.5rem; font-size: 1.25rem; }
    .recipe-description { font-size: 14px; line-height: 1.5; color: #555; }
    .recipe-meta { display: flex; justify-content: space-between; align-items: center; margin-top: 1rem; }
    .meta-item { display: flex; gap: 0.25rem; align-items: center; font-size: 14px; }
    .difficulty { padding: 0.25rem 0.75rem; border-radius: 999px; font-size: 12px; font-weight: 600; text-transform: capitalize; }
    .difficulty.easy { background: #e0f4e8; color: #2a7a4b; }
    .difficulty.medium { background: #fff3d6; color: #a06c00; }
    .difficulty.hard { background: #fde2e0; color: #b3261e; }
    .empty-state { grid-column: 1 / -1; text-align: center; padding: 3rem 1rem; color: #777; }
    .warnings { max-width: 600px; margin: 0 auto 1rem; background: #ffc; border: 1px solid #cc0; padding: 1rem; border-radius: 8px; }
'''


def format_control_button(group_name: str, control) -> str:
    """One control as a form that posts a selection event."""
    active = " active" if control.active else ""
    value = escape(control.value)
    return (
        f'<form method="POST" action="/select">'
        f'<input type="hidden" name="group" value="{escape(group_name)}">'
        f'<button type="submit" name="key" value="{value}" '
        f'class="{escape(group_name)}-btn{active}" data-{escape(group_name)}="{value}">'
        f'{escape(control.label)}</button>'
        f'</form>'
    )


def format_controls(group, label: str = "") -> str:
    """Render a control group with its active control highlighted."""
    buttons = ''.join(format_control_button(group.name, control) for control in group.controls)
    label_html = f'<span class="control-label">{escape(label)}</span>' if label else ""
    return f'<div class="control-group {escape(group.name)}-group">{label_html}{buttons}</div>'


def format_warnings(warnings: list[str]) -> str:
    if not warnings:
        return ""
    items = "".join(f"<li>{escape(w)}</li>" for w in warnings)
    return f'<div class="warnings"><strong>Warnings:</strong><ul>{items}</ul></div>'


def format_browser_page(browser, warnings: list[str] = None) -> str:
    """Generate the complete recipe browser page.

    Args:
        browser: RecipeBrowser whose controls and surface are shown
        warnings: Optional messages shown above the recipe list

    Returns:
        HTML document string
    """
    return f'''<!DOCTYPE html>
<html><head>
<title>{PAGE_TITLE}</title>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1">
<style>{PAGE_STYLE}</style>
</head>
<body>
<header>
    <h1>{PAGE_TITLE}</h1>
    <p>{len(browser.recipes)} recipes in the collection</p>
</header>
<section class="controls">
    {format_controls(browser.filter_controls, "Filter:")}
    {format_controls(browser.sort_controls, "Sort:")}
</section>
{format_warnings(warnings)}
<main id="recipe-container">{browser.surface.content}</main>
</body></html>'''
