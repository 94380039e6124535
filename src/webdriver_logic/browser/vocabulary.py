"""Closed vocabularies of HTML tag and attribute names.

WebDriver cannot list the attributes an element carries, so relations that
leave the attribute name open enumerate these names instead.
"""

HTML_TAGS: frozenset[str] = frozenset({
    "a", "abbr", "address", "area", "article", "aside", "audio",
    "b", "base", "bdi", "bdo", "blockquote", "body", "br", "button",
    "canvas", "caption", "cite", "code", "col", "colgroup",
    "data", "datalist", "dd", "del", "details", "dfn", "dialog", "div", "dl", "dt",
    "em", "embed",
    "fieldset", "figcaption", "figure", "footer", "form",
    "h1", "h2", "h3", "h4", "h5", "h6", "head", "header", "hgroup", "hr", "html",
    "i", "iframe", "img", "input", "ins",
    "kbd",
    "label", "legend", "li", "link",
    "main", "map", "mark", "menu", "meta", "meter",
    "nav", "noscript",
    "object", "ol", "optgroup", "option", "output",
    "p", "param", "picture", "pre", "progress",
    "q",
    "rp", "rt", "ruby",
    "s", "samp", "script", "search", "section", "select", "slot", "small", "source",
    "span", "strong", "style", "sub", "summary", "sup", "svg",
    "table", "tbody", "td", "template", "textarea", "tfoot", "th", "thead", "time",
    "title", "tr", "track",
    "u", "ul",
    "var", "video",
    "wbr",
})

# Ordered so enumeration over attribute names is deterministic
HTML_ATTRIBUTES: tuple[str, ...] = (
    "accept",
    "accept-charset",
    "accesskey",
    "action",
    "align",
    "alt",
    "autocomplete",
    "autofocus",
    "checked",
    "class",
    "cols",
    "colspan",
    "content",
    "contenteditable",
    "dir",
    "disabled",
    "download",
    "draggable",
    "enctype",
    "for",
    "form",
    "headers",
    "height",
    "hidden",
    "href",
    "hreflang",
    "id",
    "lang",
    "list",
    "max",
    "maxlength",
    "media",
    "method",
    "min",
    "multiple",
    "name",
    "pattern",
    "placeholder",
    "readonly",
    "rel",
    "required",
    "role",
    "rows",
    "rowspan",
    "selected",
    "size",
    "span",
    "src",
    "start",
    "step",
    "style",
    "tabindex",
    "target",
    "title",
    "type",
    "value",
    "width",
)


def is_known_tag(tag: str) -> bool:
    return tag.lower() in HTML_TAGS
