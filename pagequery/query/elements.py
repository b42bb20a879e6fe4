"""
Per-tag element facades.

Most tag-specific accessors only read one attribute with a type and a
default; they are declared with the accessor factories below. Behaviour
shared by unrelated tags lives in capability mixins (HrefCapable,
FormAssociated, TableCell, ...) that are combined with the base Element.
"""

import logging
from typing import List, Optional, Sequence

from ..dom.node import Node
from ..utils.url import URL, resolve
from .attributes import value_or_html
from .element import Element

logger = logging.getLogger(__name__)

# Default for URL accessors that fall back to the selection's base URL
BASE_URL = object()

REFERRER_POLICIES = ("", "no-referrer", "no-referrer-when-downgrade", "origin",
                     "origin-when-cross-origin", "unsafe-url")
CROSS_ORIGIN = ("anonymous", "use-credentials")
AUTOCOMPLETE = ("on", "off")
ENCTYPES = ("application/x-www-form-urlencoded", "multipart/form-data", "text/plain")
INPUT_TYPES = ("text", "button", "checkbox", "color", "date", "datetime-local", "email",
               "file", "hidden", "image", "month", "number", "password", "radio", "range",
               "reset", "search", "submit", "tel", "time", "url", "week")

METHOD_GET = "get"
METHOD_POST = "post"


def string_attr(name: str):
    """Accessor for an attribute read as a string, empty when absent."""
    def accessor(self) -> str:
        return self.attr_as_string(name)
    accessor.__doc__ = f"The {name} attribute, or an empty string."
    return accessor


def bool_attr(name: str):
    """Accessor that is True when the attribute is present."""
    def accessor(self) -> bool:
        return self.attr_is_present(name)
    accessor.__doc__ = f"Whether the {name} attribute is present."
    return accessor


def int_attr(name: str, default: int):
    """Accessor for an integer attribute with a default."""
    def accessor(self) -> int:
        return self.attr_as_int(name, default)
    accessor.__doc__ = f"The {name} attribute as an integer, default {default}."
    return accessor


def url_attr(name: str, default=""):
    """
    Accessor for a URL attribute resolved against the base URL.

    Args:
        name: The attribute name
        default: Result for an absent attribute when a base URL is set;
            BASE_URL means the base URL itself
    """
    def accessor(self) -> str:
        fallback = self.base_url if default is BASE_URL else default
        return self.attr_as_url_string(name, fallback)
    accessor.__doc__ = f"The {name} attribute resolved against the base URL."
    return accessor


def enum_attr(name: str, options: Sequence[str]):
    """Accessor for an enumerated attribute; unknown values give the first option."""
    def accessor(self) -> str:
        value = self.attr_as_string(name)
        return value if value in options else options[0]
    accessor.__doc__ = f"The {name} attribute, one of {', '.join(repr(o) for o in options)}."
    return accessor


def nullable_enum_attr(name: str, options: Sequence[str]):
    """Accessor for an enumerated attribute that is None when unset or unknown."""
    def accessor(self) -> Optional[str]:
        value = self.get_attribute(name)
        return value if value in options else None
    accessor.__doc__ = f"The {name} attribute if it is one of {', '.join(options)}, else None."
    return accessor


def const_attr(value: str):
    def accessor(self) -> str:
        return value
    return accessor


def _descendants(node: Node, *tag_names: str) -> List[Node]:
    return [child for child in node.descendants()
            if child.is_element and child.tag_name in tag_names]


def _position(nodes: List[Node], node: Node) -> int:
    for i, candidate in enumerate(nodes):
        if candidate is node:
            return i
    return -1


# Capabilities

class HrefCapable:
    """Elements with a hyperlink: href reflection and URL decomposition."""

    download = string_attr('download')
    referrer_policy = enum_attr('referrerpolicy', REFERRER_POLICIES)
    rel = string_attr('rel')
    href = url_attr('href')
    target = string_attr('target')
    type = string_attr('type')
    access_key = string_attr('accesskey')
    href_lang = string_attr('hreflang')
    to_string = url_attr('href')

    def _href_url(self) -> URL:
        return URL(self.attr_as_url('href') or "")

    def hash(self) -> str:
        return self._href_url().hash

    def host(self) -> str:
        return self._href_url().host

    def hostname(self) -> str:
        return self._href_url().hostname

    def port(self) -> str:
        return self._href_url().port

    def username(self) -> str:
        return self._href_url().username

    def password(self) -> str:
        return self._href_url().password

    def origin(self) -> str:
        return self._href_url().origin

    def pathname(self) -> str:
        return self._href_url().pathname

    def protocol(self) -> str:
        return self._href_url().protocol

    def search(self) -> str:
        return self._href_url().search

    def rel_list(self) -> List[str]:
        return self.split_attr('rel')

    def text(self) -> str:
        return self.text_content()


class MediaCapable:
    """Audio and video elements."""

    autoplay = bool_attr('autoplay')
    controls = bool_attr('controls')
    loop = bool_attr('loop')
    muted = bool_attr('muted')
    preload = enum_attr('preload', ("auto", "metadata", "none"))
    src = url_attr('src')
    cross_origin = nullable_enum_attr('crossorigin', CROSS_ORIGIN)
    current_src = string_attr('src')
    default_muted = bool_attr('muted')
    media_group = string_attr('mediagroup')

    def text_tracks(self) -> List[Element]:
        return self._wrap_all(_descendants(self.node, 'track'))


class FormOwned:
    """Elements that report their owner form."""

    def form(self) -> Optional[Element]:
        return self.owner_form()


class LabelableControl:
    """Elements that can be the target of a label."""

    def labels(self) -> List[Element]:
        return self.elem_labels()


class FormAssociated(FormOwned, LabelableControl):
    """
    Submittable controls (button, input).

    The form* accessors read the control's own form<attr> override first,
    then the owner form's attribute.
    """

    name = string_attr('name')

    def _form_or_elem_attr(self, attr_name: str) -> Optional[str]:
        value = self.get_attribute('form' + attr_name)
        if value is not None:
            return value

        form = self.owner_form_node()
        if form is None:
            return None
        return form.get_attribute(attr_name)

    def form_action(self) -> str:
        """
        Get the URL the control submits to.

        Returns:
            The resolved action, the base URL when there is no action, or the
            raw action when no base URL is set
        """
        action = self._form_or_elem_attr('action')
        if not self.base_url:
            return action or ""

        if not action:
            return self.base_url

        return resolve(self.base_url, action) or action

    def form_enctype(self) -> str:
        enctype = self._form_or_elem_attr('enctype')
        return enctype if enctype in ENCTYPES[1:] else ENCTYPES[0]

    def form_method(self) -> str:
        method = (self._form_or_elem_attr('method') or "").lower()
        return METHOD_POST if method == METHOD_POST else METHOD_GET

    def form_no_validate(self) -> bool:
        return self._form_or_elem_attr('novalidate') is not None

    def form_target(self) -> str:
        return self._form_or_elem_attr('target') or ""


class TableSection:
    """thead, tbody and tfoot."""

    def rows(self) -> List[Element]:
        return self._wrap_all(_descendants(self.node, 'tr'))


class TableCell:
    """td and th."""

    col_span = int_attr('colspan', 1)
    row_span = int_attr('rowspan', 1)
    headers = string_attr('headers')

    def cell_index(self) -> int:
        row = self.ancestor_node('tr')
        if row is None:
            return -1
        return _position(_descendants(row, 'th', 'td'), self.node)


class Mod:
    """ins and del."""

    cite = string_attr('cite')
    datetime = string_attr('datetime')


# Tag classes

class AnchorElement(HrefCapable, Element):
    pass


class AreaElement(HrefCapable, Element):
    pass


class AudioElement(MediaCapable, Element):
    pass


class VideoElement(MediaCapable, Element):
    pass


class BaseElement(Element):
    href = url_attr('href', BASE_URL)
    target = string_attr('target')


class ButtonElement(FormAssociated, Element):
    access_key = string_attr('accesskey')
    autofocus = bool_attr('autofocus')
    disabled = bool_attr('disabled')
    tab_index = int_attr('tabindex', 0)
    type = enum_attr('type', ("submit", "button", "menu", "reset"))

    def value(self) -> str:
        return value_or_html(self.node)


class CanvasElement(Element):
    width = int_attr('width', 150)
    height = int_attr('height', 150)


class DataElement(Element):
    value = string_attr('value')


class DataListElement(Element):
    def options(self) -> List[Element]:
        return self._wrap_all(_descendants(self.node, 'option'))


class DelElement(Mod, Element):
    pass


class InsElement(Mod, Element):
    pass


class EmbedElement(Element):
    height = string_attr('height')
    width = string_attr('width')
    src = string_attr('src')
    type = string_attr('type')


class FieldSetElement(FormOwned, Element):
    disabled = bool_attr('disabled')
    name = string_attr('name')
    type = const_attr('fieldset')

    def elements(self) -> List[Element]:
        return self._wrap_all(_descendants(self.node, 'input', 'select', 'button', 'textarea'))

    def validity(self) -> None:
        return None


class FormElement(Element):
    action = url_attr('action')
    name = string_attr('name')
    target = string_attr('target')
    enctype = enum_attr('enctype', ENCTYPES)
    encoding = enum_attr('enctype', ENCTYPES)
    accept_charset = string_attr('accept-charset')
    autocomplete = enum_attr('autocomplete', AUTOCOMPLETE)
    no_validate = bool_attr('novalidate')

    def _control_nodes(self) -> List[Node]:
        return _descendants(self.node, 'input', 'select', 'button', 'textarea', 'fieldset')

    def elements(self) -> List[Element]:
        return self._wrap_all(self._control_nodes())

    def length(self) -> int:
        return len(self._control_nodes())

    def method(self) -> str:
        if self.attr_as_string('method').lower() == METHOD_POST:
            return METHOD_POST
        return METHOD_GET


class IFrameElement(Element):
    allowfullscreen = bool_attr('allowfullscreen')
    referrer_policy = enum_attr('referrerpolicy', REFERRER_POLICIES)
    height = string_attr('height')
    width = string_attr('width')
    name = string_attr('name')
    src = url_attr('src')


class ImageElement(Element):
    current_src = url_attr('src')
    sizes = string_attr('sizes')
    srcset = string_attr('srcset')
    alt = string_attr('alt')
    cross_origin = nullable_enum_attr('crossorigin', CROSS_ORIGIN)
    height = int_attr('height', 0)
    width = int_attr('width', 0)
    is_map = bool_attr('ismap')
    name = string_attr('name')
    src = url_attr('src')
    use_map = string_attr('usemap')
    referrer_policy = enum_attr('referrerpolicy', REFERRER_POLICIES)


class InputElement(FormAssociated, Element):
    tab_index = int_attr('tabindex', 0)
    type = enum_attr('type', INPUT_TYPES)
    disabled = bool_attr('disabled')
    autofocus = bool_attr('autofocus')
    required = bool_attr('required')
    value = string_attr('value')
    checked = bool_attr('checked')
    default_checked = bool_attr('checked')
    alt = string_attr('alt')
    src = url_attr('src')
    height = string_attr('height')
    width = string_attr('width')
    accept = string_attr('accept')
    autocomplete = enum_attr('autocomplete', AUTOCOMPLETE)
    max_length = int_attr('maxlength', -1)
    size = int_attr('size', 0)
    pattern = string_attr('pattern')
    placeholder = string_attr('placeholder')
    readonly = bool_attr('readonly')
    min = string_attr('min')
    max = string_attr('max')
    default_value = string_attr('value')
    dir_name = string_attr('dirname')
    access_key = string_attr('accesskey')
    multiple = bool_attr('multiple')
    step = string_attr('step')

    def list(self) -> Optional[Element]:
        """Get the datalist named by the `list` attribute."""
        list_id = self.attr_as_string('list')
        if not list_id:
            return None

        if self.attr_as_string('type') in ('hidden', 'checkbox', 'radio', 'file', 'button'):
            return None

        matches = self.find_in_document(
            lambda node: node.tag_name == 'datalist' and node.get_attribute('id') == list_id)
        return self._wrap(matches[0]) if matches else None


class KeygenElement(FormOwned, LabelableControl, Element):
    autofocus = bool_attr('autofocus')
    challenge = string_attr('challenge')
    disabled = bool_attr('disabled')
    keytype = enum_attr('keytype', ("RSA", "DSA", "EC"))
    name = string_attr('name')
    type = const_attr('keygen')


class LabelElement(FormOwned, Element):
    html_for = string_attr('for')

    def control(self) -> Optional[Element]:
        """Get the element whose id the `for` attribute names."""
        for_id = self.get_attribute('for')
        if not for_id:
            return None

        matches = self.find_in_document(lambda node: node.get_attribute('id') == for_id)
        return self._wrap(matches[0]) if matches else None


class LegendElement(FormOwned, Element):
    access_key = string_attr('accesskey')


class LiElement(Element):
    value = int_attr('value', 0)
    type = enum_attr('type', ("", "1", "a", "A", "i", "I", "disc", "square", "circle"))


class LinkElement(Element):
    cross_origin = nullable_enum_attr('crossorigin', CROSS_ORIGIN)
    referrer_policy = enum_attr('referrerpolicy', REFERRER_POLICIES)
    href = url_attr('href')
    hreflang = string_attr('hreflang')
    media = string_attr('media')
    rel = string_attr('rel')
    target = string_attr('target')
    type = string_attr('type')

    def rel_list(self) -> List[str]:
        return self.split_attr('rel')


class MapElement(Element):
    name = string_attr('name')

    def areas(self) -> List[Element]:
        return self._wrap_all(_descendants(self.node, 'area'))

    def images(self) -> List[Element]:
        """Get the images and objects whose usemap refers to this map."""
        map_name = self.get_attribute('id')
        if map_name is None:
            map_name = self.get_attribute('name')
        if map_name is None:
            return []

        usemap = f"#{map_name}"
        return self._wrap_all(self.find_in_document(
            lambda node: node.tag_name in ('img', 'object') and node.get_attribute('usemap') == usemap))


class MetaElement(Element):
    content = string_attr('content')
    name = string_attr('name')
    http_equiv = enum_attr('http-equiv', ("content-type", "default-style", "refresh"))


class MeterElement(LabelableControl, Element):
    min = int_attr('min', 0)
    max = int_attr('max', 0)
    high = int_attr('high', 0)
    low = int_attr('low', 0)
    optimum = int_attr('optimum', 0)


class ObjectElement(FormOwned, Element):
    data = url_attr('data')
    height = string_attr('height')
    name = string_attr('name')
    type = string_attr('type')
    tab_index = int_attr('tabindex', 0)
    type_must_match = bool_attr('typemustmatch')
    use_map = string_attr('usemap')
    width = string_attr('width')


class OListElement(Element):
    reversed = bool_attr('reversed')
    start = int_attr('start', 0)
    type = enum_attr('type', ("1", "a", "A", "i", "I"))


class OptGroupElement(Element):
    disabled = bool_attr('disabled')
    label = string_attr('label')


class OptionElement(Element):
    default_selected = bool_attr('selected')
    selected = bool_attr('selected')

    def disabled(self) -> bool:
        """An option is disabled by its own attribute or by a disabled optgroup."""
        if self.attr_is_present('disabled'):
            return True
        group = self.ancestor_node('optgroup')
        return group is not None and group.has_attribute('disabled')

    def form(self) -> Optional[Element]:
        form = self.ancestor_node('form')
        if form is not None:
            return self._wrap(form)

        select = self.ancestor_node('select')
        form_id = select.get_attribute('form') if select is not None else None
        if form_id is None:
            return None

        matches = self.find_in_document(
            lambda node: node.tag_name == 'form' and node.get_attribute('id') == form_id)
        return self._wrap(matches[0]) if matches else None

    def index(self) -> int:
        holder = self.ancestor_node('select', 'datalist')
        if holder is None:
            return 0
        return _position(_descendants(holder, 'option'), self.node)

    def label(self) -> str:
        label = self.get_attribute('label')
        if label is not None:
            return label
        return self.text_content()

    def text(self) -> str:
        return self.text_content()

    def value(self) -> str:
        return value_or_html(self.node)


class OutputElement(FormOwned, LabelableControl, Element):
    html_for = string_attr('for')
    name = string_attr('name')
    type = const_attr('output')

    def value(self) -> str:
        return self.text_content()

    def default_value(self) -> str:
        return self.text_content()


class ParamElement(Element):
    name = string_attr('name')
    value = string_attr('value')


class PreElement(Element):
    name = string_attr('name')
    value = string_attr('value')


class ProgressElement(LabelableControl, Element):

    def _float_attr(self, name: str) -> Optional[float]:
        raw = self.get_attribute(name)
        if raw is None:
            return None
        try:
            value = float(raw)
        except ValueError:
            return None
        return value if value >= 0 else None

    def max(self) -> float:
        """The max attribute; missing, invalid or zero values read as 1.0."""
        maximum = self._float_attr('max')
        return maximum if maximum else 1.0

    def _progress(self, default: float) -> float:
        value = self._float_attr('value')
        if value is None:
            return default
        return value / self.max()

    def value(self) -> float:
        return self._progress(0.0)

    def position(self) -> float:
        return self._progress(-1.0)


class QuoteElement(Element):
    cite = string_attr('cite')


class ScriptElement(Element):
    cross_origin = string_attr('crossorigin')
    type = string_attr('type')
    src = url_attr('src')
    charset = string_attr('charset')
    async_ = bool_attr('async')
    defer = bool_attr('defer')
    no_module = bool_attr('nomodule')

    def text(self) -> str:
        return self.text_content()


class SelectElement(FormOwned, LabelableControl, Element):
    autofocus = bool_attr('autofocus')
    disabled = bool_attr('disabled')
    multiple = bool_attr('multiple')
    name = string_attr('name')
    required = bool_attr('required')
    tab_index = int_attr('tabindex', 0)

    def _options(self) -> List[Node]:
        return _descendants(self.node, 'option')

    def _selected(self) -> List[Node]:
        return [option for option in self._options() if option.has_attribute('selected')]

    def length(self) -> int:
        return len(self._options())

    def options(self) -> List[Element]:
        return self._wrap_all(self._options())

    def selected_index(self) -> int:
        selected = self._selected()
        if not selected:
            return -1
        return _position(self._options(), selected[0])

    def selected_options(self) -> List[Element]:
        return self._wrap_all(self._selected())

    def size(self) -> int:
        return 4 if self.attr_is_present('multiple') else 1

    def type(self) -> str:
        return "select-multiple" if self.attr_is_present('multiple') else "select"

    def value(self) -> str:
        selected = self._selected()
        if not selected:
            return ""
        return value_or_html(selected[0])


class SourceElement(Element):
    key_system = string_attr('keysystem')
    media = string_attr('media')
    sizes = string_attr('sizes')
    src = url_attr('src')
    srcset = string_attr('srcset')
    type = string_attr('type')


class StyleElement(Element):
    media = string_attr('media')

    def type(self) -> str:
        return self.attr_as_string('type') or "text/css"


class TableElement(Element):
    sortable = bool_attr('sortable')

    def _first_child(self, tag_name: str) -> Optional[Element]:
        for child in self.node.children:
            if child.tag_name == tag_name:
                return self._wrap(child)
        return None

    def caption(self) -> Optional[Element]:
        return self._first_child('caption')

    def thead(self) -> Optional[Element]:
        return self._first_child('thead')

    def tfoot(self) -> Optional[Element]:
        return self._first_child('tfoot')

    def rows(self) -> List[Element]:
        return self._wrap_all(_descendants(self.node, 'tr'))

    def tbodies(self) -> List[Element]:
        return self._wrap_all(_descendants(self.node, 'tbody'))


class TableHeadElement(TableSection, Element):
    pass


class TableFootElement(TableSection, Element):
    pass


class TableBodyElement(TableSection, Element):
    pass


class TableRowElement(Element):

    def cells(self) -> List[Element]:
        return self._wrap_all(_descendants(self.node, 'th', 'td'))

    def row_index(self) -> int:
        table = self.ancestor_node('table')
        if table is None:
            return -1
        return _position(_descendants(table, 'tr'), self.node)

    def section_row_index(self) -> int:
        section = self.ancestor_node('thead', 'tbody', 'tfoot')
        if section is None:
            return -1
        return _position(_descendants(section, 'tr'), self.node)


class TableColElement(Element):

    def span(self) -> int:
        return max(1, self.attr_as_int('span', 1))


class TableDataCellElement(TableCell, Element):
    pass


class TableHeaderCellElement(TableCell, Element):
    abbr = string_attr('abbr')
    scope = enum_attr('scope', ("", "row", "col", "colgroup", "rowgroup"))
    sorted = bool_attr('sorted')


class TextAreaElement(FormOwned, LabelableControl, Element):
    type = const_attr('textarea')
    value = string_attr('value')
    default_value = string_attr('value')
    placeholder = string_attr('placeholder')
    rows = int_attr('rows', 0)
    cols = int_attr('cols', 0)
    max_length = int_attr('maxlength', 0)
    tab_index = int_attr('tabindex', 0)
    access_key = string_attr('accesskey')
    read_only = bool_attr('readonly')
    required = bool_attr('required')
    autocomplete = enum_attr('autocomplete', AUTOCOMPLETE)
    autocapitalize = enum_attr('autocapitalize', ("sentences", "none", "off", "characters", "words"))
    wrap = enum_attr('wrap', ("soft", "hard", "off"))

    def length(self) -> int:
        return len(self.attr_as_string('value'))


class TimeElement(Element):
    datetime = string_attr('datetime')


class TitleElement(Element):

    def text(self) -> str:
        return self.text_content()


class TrackElement(Element):
    kind = enum_attr('kind', ("subtitle", "captions", "descriptions", "chapters", "metadata"))
    src = url_attr('src')
    srclang = string_attr('srclang')
    label = string_attr('label')
    default = bool_attr('default')


class UListElement(Element):
    type = string_attr('type')


TAG_CLASSES = {
    'a': AnchorElement,
    'area': AreaElement,
    'audio': AudioElement,
    'base': BaseElement,
    'blockquote': QuoteElement,
    'button': ButtonElement,
    'canvas': CanvasElement,
    'col': TableColElement,
    'data': DataElement,
    'datalist': DataListElement,
    'del': DelElement,
    'embed': EmbedElement,
    'fieldset': FieldSetElement,
    'form': FormElement,
    'iframe': IFrameElement,
    'img': ImageElement,
    'input': InputElement,
    'ins': InsElement,
    'keygen': KeygenElement,
    'label': LabelElement,
    'legend': LegendElement,
    'li': LiElement,
    'link': LinkElement,
    'map': MapElement,
    'meta': MetaElement,
    'meter': MeterElement,
    'object': ObjectElement,
    'ol': OListElement,
    'optgroup': OptGroupElement,
    'option': OptionElement,
    'output': OutputElement,
    'param': ParamElement,
    'pre': PreElement,
    'progress': ProgressElement,
    'q': QuoteElement,
    'script': ScriptElement,
    'select': SelectElement,
    'source': SourceElement,
    'style': StyleElement,
    'table': TableElement,
    'tbody': TableBodyElement,
    'td': TableDataCellElement,
    'textarea': TextAreaElement,
    'tfoot': TableFootElement,
    'th': TableHeaderCellElement,
    'thead': TableHeadElement,
    'time': TimeElement,
    'title': TitleElement,
    'tr': TableRowElement,
    'track': TrackElement,
    'ul': UListElement,
    'video': VideoElement,
}


class ElementFactory:
    """
    Factory class for element facades.
    """

    @classmethod
    def create_element(cls, node: Node, sel) -> Element:
        """
        Create a facade based on the node's tag name.

        Args:
            node: The DOM node to wrap
            sel: The selection the node was taken from

        Returns:
            The tag-specific Element subclass for HTML elements, otherwise
            the base Element
        """
        if node.is_element and not node.namespace_prefix:
            facade_class = TAG_CLASSES.get(node.tag_name)
            if facade_class is not None:
                return facade_class(node, sel)
            logger.debug(f"No facade for <{node.tag_name}>, using Element")
        return Element(node, sel)
