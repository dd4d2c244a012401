"""
Region Writer

Writes a RenderOutput into a host HTML page. Every element tagged with a
matching key receives the content, so a key may appear any number of times
(including zero) in the page:

- data-section="<section>"      inner HTML replaced by the section fragment
- data-field="name|initials"    text replaced
- data-label="<label key>"      text replaced
- data-region="projects-heading" text replaced by the heading label
- data-layout="primary|alternate" hidden attribute toggled
- data-lang="<code>"            "active" class toggled
- <select data-control="theme"> selected option set
- <style id="theme-variables">  theme custom properties written
"""

from bs4 import BeautifulSoup

from resumesite.contexts.templating.defaults import ALTERNATE_SLOT, PRIMARY_SLOT
from resumesite.contexts.templating.engine import RenderOutput
from resumesite.contexts.templating.theme_resolver import theme_style_block

PARSER = "html.parser"
ACTIVE_CLASS = "active"
THEME_STYLE_ID = "theme-variables"


def _set_text(soup: BeautifulSoup, attribute: str, key: str, text: str) -> int:
    elements = soup.find_all(attrs={attribute: key})
    for element in elements:
        element.string = text
    return len(elements)


def _set_inner_html(soup: BeautifulSoup, attribute: str, key: str, fragment: str) -> int:
    elements = soup.find_all(attrs={attribute: key})
    for element in elements:
        element.clear()
        # Parse per element: appended nodes move out of their source tree
        for child in list(BeautifulSoup(fragment, PARSER).contents):
            element.append(child)
    return len(elements)


def _set_visible(soup: BeautifulSoup, slot: str, visible: bool) -> None:
    for element in soup.find_all(attrs={"data-layout": slot}):
        if visible:
            element.attrs.pop("hidden", None)
        else:
            element["hidden"] = ""


def _set_active_languages(soup: BeautifulSoup, output: RenderOutput) -> None:
    active = {control.code: control.active for control in output.language_controls}
    for element in soup.find_all(attrs={"data-lang": True}):
        classes = [c for c in element.get("class", []) if c != ACTIVE_CLASS]
        if active.get(element["data-lang"]):
            classes.append(ACTIVE_CLASS)
        element["class"] = classes


def _set_theme(soup: BeautifulSoup, output: RenderOutput) -> None:
    for select in soup.find_all("select", attrs={"data-control": "theme"}):
        for option in select.find_all("option"):
            if option.get("value") == output.theme:
                option["selected"] = ""
            else:
                option.attrs.pop("selected", None)

    for style in soup.find_all("style", id=THEME_STYLE_ID):
        style.string = theme_style_block(output.theme_variables)

    if soup.html is not None:
        soup.html["data-theme"] = output.theme
        soup.html["lang"] = output.language


def fill_regions(html: str, output: RenderOutput) -> str:
    """
    Write one render pass into every tagged region of a host page.

    Args:
        html: Host page HTML
        output: Result of ResumeEngine.render()

    Returns:
        The page with all regions replaced
    """
    soup = BeautifulSoup(html, PARSER)

    for key, text in output.labels.items():
        _set_text(soup, "data-label", key, text)

    for key, text in output.fields.items():
        _set_text(soup, "data-field", key, text)

    for key, fragment in output.sections.items():
        _set_inner_html(soup, "data-section", key, fragment)

    for element in soup.find_all(attrs={"data-region": "projects-heading"}):
        element.string = output.heading_label
        element["data-heading-mode"] = output.heading_mode.value

    _set_visible(soup, PRIMARY_SLOT, output.layout.primary)
    _set_visible(soup, ALTERNATE_SLOT, output.layout.alternate)
    _set_active_languages(soup, output)
    _set_theme(soup, output)

    return str(soup)
