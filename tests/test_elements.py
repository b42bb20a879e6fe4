"""Tests for the per-tag element facades."""

import pytest

from pagequery import parse_html
from pagequery.query import elements

GEN_HTML = """<html><body>
<a id="a1" download="file:///path/name" referrerpolicy="no-referrer" rel="open" href="http://test.url" target="__blank" type="text/html" accesskey="w" hreflang="es">link text</a>
<a id="a2"></a>
<a id="a3" href="relpath"></a>
<a id="a4" href="/abspath"></a>
<a id="a5" href="?a=yes-a&amp;b=yes-b"></a>
<a id="a6" href="#testfrag"></a>
<a id="a7" href="../prtpath"></a>
<a id="a8" href=""></a>
<a id="a9" href="https://user:pw@example.com:8080/some/path?q=1#frag"></a>
<audio id="audio1" autoplay controls loop muted src="foo.wav" crossorigin="anonymous" mediagroup="testgroup"><track id="track0" src="a.vtt"></audio>
<audio id="audio2"></audio>
<audio id="audio3" src=""></audio>
<video id="video1" src="movie.mp4" controls></video>
<base id="base1" href="foo.html" target="__any">
<base id="base2">
<base id="base3" href="" target="__any">
<button id="btn1" accesskey="e" autofocus disabled type="button"></button>
<button id="btn2"></button>
<button id="btn3" type="invalid_uses_default">Label</button>
<canvas id="canvas1" width="300"></canvas>
<data id="data1" value="121"></data><data id="data2"></data>
<embed id="embed1" type="video/avi" src="movie.avi" width="640" height="480">
<fieldset id="fset1" disabled name="fset1_name"><legend id="legend1" accesskey="l">Legend</legend><input id="fset_input"><textarea id="fset_text"></textarea></fieldset>
<fieldset id="fset2"></fieldset>
<form id="form1" name="form1_name" target="__self" enctype="text/plain" action="submit_url" accept-charset="ISO-8859-1" autocomplete="off" novalidate method="POST">
  <input id="in_form" name="in_form">
  <button id="btn_override" formaction="other_url" formmethod="get" formenctype="multipart/form-data" formtarget="_blank" formnovalidate></button>
</form>
<form id="form2"></form>
<form id="form3" action=""></form>
<input id="input_owned" form="form1">
<iframe id="iframe1" allowfullscreen referrerpolicy="no-referrer" name="frame_name" width="640" height="480" src="testframe.html"></iframe>
<iframe id="iframe2" referrerpolicy="use-default-when-invalid"></iframe>
<iframe id="iframe3" src=""></iframe>
<img id="img1" src="test.png" sizes="100vw,50vw" srcset="large.jpg 1024w,medium.jpg 640w" alt="alt text" crossorigin="anonymous" height="50" width="100" ismap name="img_name" usemap="#map1_name" referrerpolicy="origin">
<img id="img2" crossorigin="use-credentials" referrerpolicy="use-default-when-invalid">
<img id="img3" src="">
<input id="input1" name="input1_name" disabled autofocus required value="input1-val" type="button">
<input id="input2">
<input id="input3" type="checkbox" checked multiple>
<input id="input4" type="checkbox">
<input id="input5" type="image" alt="input_img" src="input.png" width="80" height="40">
<input id="input5b" type="image">
<input id="input5c" type="image" src="">
<input id="input6" type="file" accept=".jpg,.png">
<input id="input7" type="text" autocomplete="off" maxlength="10" size="5" pattern="..." placeholder="help text" readonly min="2017-01-01" max="2017-12-12" dirname="input7.dir" accesskey="s" step="0.1" list="browsers">
<input id="input8" type="checkbox" list="browsers">
<datalist id="browsers"><option id="dl_opt1" value="Firefox"></option><option id="dl_opt2" value="Chrome"></option></datalist>
<keygen id="kg1" autofocus challenge="cx1" disabled keytype="DSA" name="kg1_name">
<keygen id="kg2">
<keygen id="kg3" keytype="dsa">
<label id="label1" for="input1">Input one</label>
<label id="label2">Wrapped <input id="wrapped_input"></label>
<label id="label3" for="">Empty</label>
<ul><li id="li1" type="disc"></li><li id="li2" value="10" type=""></li></ul>
<link id="link1" crossorigin="use-credentials" referrerpolicy="no-referrer" href="test.css" hreflang="pl" media="print" rel="alternate author" target="__self" type="stylesheet">
<link id="link2">
<link id="link3" href="">
<map name="map1_name"><area id="area1" href="/area"></map>
<meta id="meta1" name="author" content="author name">
<meta id="meta2" http-equiv="refresh" content="1;www.test.com">
<meter id="meter1" min="90" max="110" low="95" high="105" optimum="100"></meter>
<ins id="ins1" cite="cite.html" datetime="2017-01-01"></ins>
<del id="del1" cite="why.html" datetime="2018-01-01"></del>
<object id="object1" name="obj1_name" data="test.png" type="image/png" width="150" height="75" tabindex="6" typemustmatch usemap="#map1_name"></object>
<object id="object2"></object>
<object id="object3" data=""></object>
<ol id="ol1" reversed start="1" type="a"></ol><ol id="ol2"></ol>
<select id="select1" name="sel1_name" autofocus disabled multiple required>
  <optgroup id="optgroup1" disabled label="optlabel"><option id="opt1" selected>Opt 1</option></optgroup>
  <optgroup id="optgroup2"><option id="opt2" value="v2" label="Second">Opt 2</option><option id="opt3" value="v3" selected>Opt 3</option></optgroup>
</select>
<select id="select2"><option id="opt4">Only</option></select>
<output id="out1" for="input1" name="out1_name">42</output>
<param id="par1" name="param1_name" value="param1_val">
<pre id="pre1" name="pre1_name" value="pre1_val"></pre>
<progress id="prog1" max="200" value="50"></progress>
<progress id="prog2"></progress>
<progress id="prog3" value="0.25"></progress>
<q id="quote1" cite="http://cite.com/url"></q>
<blockquote id="bq1" cite="source.html"></blockquote>
<script id="script1" crossorigin="use-credentials" type="text/javascript" src="script.js" charset="ISO-8859-1" defer async nomodule></script>
<script id="script2">var x = 1 < 2;</script>
<script id="script3" src=""></script>
<source id="src1" keysystem="keysys" media="(min-width: 600px)" sizes="100vw,50vw" srcset="large.jpg 1024w,medium.jpg 640w" src="test.png" type="image/png">
<source id="src2">
<source id="src3" src="">
<style id="style1" media="print"></style>
<table id="table1" sortable><caption>Cap</caption><colgroup><col id="col1" span="3"><col id="col2" span="0"></colgroup><thead><tr id="tr_head"><th id="th0">H</th></tr></thead><tbody><tr id="tr1"><td id="td1" colspan="2" rowspan="3" headers="th1"></td><th id="th1" abbr="hdr" scope="row" sorted>Header</th><th id="th2"></th></tr><tr id="tr2"><td id="td2"></td></tr></tbody><tfoot><tr id="tr_foot"><td id="td_foot">F</td></tr></tfoot></table>
<table id="table2"></table>
<textarea id="txtarea1" value="init_txt" placeholder="display_txt" rows="10" cols="12" maxlength="128" accesskey="k" tabIndex="4" readonly required autocomplete="off" autocapitalize="words" wrap="hard"></textarea>
<textarea id="txtarea2"></textarea>
<time id="time1" datetime="2017-01-01"></time>
<track id="track1" kind="metadata" src="foo.en.vtt" srclang="en" label="English">
<track id="track2" src="foo.sv.vtt" srclang="sv" label="Svenska">
<track id="track3">
<track id="track4" src="">
<ul id="ul1" type="circle"></ul>
</body></html>"""


@pytest.fixture(scope="module")
def gen():
    return parse_html(GEN_HTML)


def elem(sel, elem_id):
    return sel.find(f"#{elem_id}").get(0)


@pytest.mark.parametrize("elem_id, prop, expected", [
    ("a1", "download", "file:///path/name"),
    ("a1", "referrerPolicy", "no-referrer"),
    ("a1", "href", "http://test.url"),
    ("a1", "target", "__blank"),
    ("a1", "type", "text/html"),
    ("a1", "accessKey", "w"),
    ("a1", "hrefLang", "es"),
    ("a1", "toString", "http://test.url"),
    ("a1", "text", "link text"),
    ("a2", "referrerPolicy", ""),
    ("a2", "accessKey", ""),
    ("audio1", "src", "foo.wav"),
    ("audio1", "crossOrigin", "anonymous"),
    ("audio1", "currentSrc", "foo.wav"),
    ("audio1", "mediaGroup", "testgroup"),
    ("audio2", "preload", "auto"),
    ("base1", "href", "foo.html"),
    ("base1", "target", "__any"),
    ("btn1", "accessKey", "e"),
    ("btn1", "type", "button"),
    ("btn2", "type", "submit"),
    ("btn3", "type", "submit"),
    ("btn3", "value", "Label"),
    ("data1", "value", "121"),
    ("data2", "value", ""),
    ("embed1", "type", "video/avi"),
    ("embed1", "src", "movie.avi"),
    ("embed1", "width", "640"),
    ("embed1", "height", "480"),
    ("fset1", "name", "fset1_name"),
    ("fset1", "type", "fieldset"),
    ("form1", "target", "__self"),
    ("form1", "action", "submit_url"),
    ("form1", "enctype", "text/plain"),
    ("form1", "encoding", "text/plain"),
    ("form1", "acceptCharset", "ISO-8859-1"),
    ("form1", "autocomplete", "off"),
    ("form1", "method", "post"),
    ("form2", "enctype", "application/x-www-form-urlencoded"),
    ("form2", "autocomplete", "on"),
    ("form2", "method", "get"),
    ("iframe1", "referrerPolicy", "no-referrer"),
    ("iframe2", "referrerPolicy", ""),
    ("iframe3", "referrerPolicy", ""),
    ("iframe1", "width", "640"),
    ("iframe1", "height", "480"),
    ("iframe1", "name", "frame_name"),
    ("iframe1", "src", "testframe.html"),
    ("img1", "src", "test.png"),
    ("img1", "currentSrc", "test.png"),
    ("img1", "sizes", "100vw,50vw"),
    ("img1", "srcset", "large.jpg 1024w,medium.jpg 640w"),
    ("img1", "alt", "alt text"),
    ("img1", "crossOrigin", "anonymous"),
    ("img1", "name", "img_name"),
    ("img1", "useMap", "#map1_name"),
    ("img1", "referrerPolicy", "origin"),
    ("img2", "crossOrigin", "use-credentials"),
    ("img2", "referrerPolicy", ""),
    ("input1", "name", "input1_name"),
    ("input1", "type", "button"),
    ("input1", "value", "input1-val"),
    ("input1", "defaultValue", "input1-val"),
    ("input2", "type", "text"),
    ("input2", "value", ""),
    ("input5", "alt", "input_img"),
    ("input5", "src", "input.png"),
    ("input5", "width", "80"),
    ("input5", "height", "40"),
    ("input6", "accept", ".jpg,.png"),
    ("input7", "autocomplete", "off"),
    ("input7", "pattern", "..."),
    ("input7", "placeholder", "help text"),
    ("input7", "min", "2017-01-01"),
    ("input7", "max", "2017-12-12"),
    ("input7", "dirName", "input7.dir"),
    ("input7", "accessKey", "s"),
    ("input7", "step", "0.1"),
    ("kg1", "challenge", "cx1"),
    ("kg1", "keytype", "DSA"),
    ("kg1", "name", "kg1_name"),
    ("kg2", "challenge", ""),
    ("kg2", "keytype", "RSA"),
    ("kg2", "type", "keygen"),
    ("kg3", "keytype", "RSA"),
    ("label1", "htmlFor", "input1"),
    ("legend1", "accessKey", "l"),
    ("li1", "type", "disc"),
    ("li2", "type", ""),
    ("link1", "crossOrigin", "use-credentials"),
    ("link1", "referrerPolicy", "no-referrer"),
    ("link1", "href", "test.css"),
    ("link1", "hreflang", "pl"),
    ("link1", "media", "print"),
    ("link1", "rel", "alternate author"),
    ("link1", "target", "__self"),
    ("link1", "type", "stylesheet"),
    ("link2", "referrerPolicy", ""),
    ("meta1", "name", "author"),
    ("meta1", "content", "author name"),
    ("meta2", "httpEquiv", "refresh"),
    ("meta2", "content", "1;www.test.com"),
    ("ins1", "cite", "cite.html"),
    ("ins1", "datetime", "2017-01-01"),
    ("del1", "cite", "why.html"),
    ("object1", "data", "test.png"),
    ("object1", "type", "image/png"),
    ("object1", "name", "obj1_name"),
    ("object1", "width", "150"),
    ("object1", "height", "75"),
    ("object1", "useMap", "#map1_name"),
    ("ol1", "type", "a"),
    ("ol2", "type", "1"),
    ("optgroup1", "label", "optlabel"),
    ("out1", "htmlFor", "input1"),
    ("out1", "name", "out1_name"),
    ("out1", "type", "output"),
    ("out1", "value", "42"),
    ("par1", "name", "param1_name"),
    ("par1", "value", "param1_val"),
    ("pre1", "name", "pre1_name"),
    ("pre1", "value", "pre1_val"),
    ("quote1", "cite", "http://cite.com/url"),
    ("bq1", "cite", "source.html"),
    ("script1", "crossOrigin", "use-credentials"),
    ("script1", "type", "text/javascript"),
    ("script1", "src", "script.js"),
    ("script1", "charset", "ISO-8859-1"),
    ("script2", "text", "var x = 1 < 2;"),
    ("select1", "name", "sel1_name"),
    ("src1", "keySystem", "keysys"),
    ("src1", "media", "(min-width: 600px)"),
    ("src1", "sizes", "100vw,50vw"),
    ("src1", "srcset", "large.jpg 1024w,medium.jpg 640w"),
    ("src1", "src", "test.png"),
    ("src1", "type", "image/png"),
    ("style1", "type", "text/css"),
    ("td1", "headers", "th1"),
    ("th1", "abbr", "hdr"),
    ("th1", "scope", "row"),
    ("txtarea1", "accessKey", "k"),
    ("txtarea1", "autocomplete", "off"),
    ("txtarea1", "autocapitalize", "words"),
    ("txtarea1", "wrap", "hard"),
    ("txtarea1", "type", "textarea"),
    ("txtarea2", "autocomplete", "on"),
    ("txtarea2", "autocapitalize", "sentences"),
    ("txtarea2", "wrap", "soft"),
    ("track1", "kind", "metadata"),
    ("track1", "src", "foo.en.vtt"),
    ("track1", "label", "English"),
    ("track1", "srclang", "en"),
    ("track2", "kind", "subtitle"),
    ("time1", "datetime", "2017-01-01"),
    ("ul1", "type", "circle"),
])
def test_text_properties(gen, elem_id, prop, expected):
    assert getattr(elem(gen, elem_id), prop)() == expected


@pytest.mark.parametrize("id_true, id_false, prop", [
    ("audio1", "audio2", "autoplay"),
    ("audio1", "audio2", "controls"),
    ("audio1", "audio2", "loop"),
    ("audio1", "audio2", "muted"),
    ("audio1", "audio2", "defaultMuted"),
    ("btn1", "btn2", "autofocus"),
    ("btn1", "btn2", "disabled"),
    ("fset1", "fset2", "disabled"),
    ("form1", "form2", "noValidate"),
    ("iframe1", "iframe2", "allowfullscreen"),
    ("img1", "img2", "isMap"),
    ("input1", "input2", "disabled"),
    ("input1", "input2", "autofocus"),
    ("input1", "input2", "required"),
    ("input3", "input4", "checked"),
    ("input3", "input4", "defaultChecked"),
    ("input7", "input1", "readonly"),
    ("input3", "input4", "multiple"),
    ("kg1", "kg2", "autofocus"),
    ("kg1", "kg2", "disabled"),
    ("object1", "object2", "typeMustMatch"),
    ("ol1", "ol2", "reversed"),
    ("optgroup1", "optgroup2", "disabled"),
    ("opt1", "opt2", "selected"),
    ("opt1", "opt2", "defaultSelected"),
    ("script1", "script2", "async"),
    ("script1", "script2", "defer"),
    ("script1", "script2", "noModule"),
    ("select1", "select2", "autofocus"),
    ("select1", "select2", "disabled"),
    ("select1", "select2", "multiple"),
    ("select1", "select2", "required"),
    ("table1", "table2", "sortable"),
    ("th1", "th2", "sorted"),
    ("txtarea1", "txtarea2", "readOnly"),
    ("txtarea1", "txtarea2", "required"),
])
def test_bool_properties(gen, id_true, id_false, prop):
    assert getattr(elem(gen, id_true), prop)() is True
    assert getattr(elem(gen, id_false), prop)() is False


@pytest.mark.parametrize("elem_id, prop, expected", [
    ("img1", "width", 100),
    ("img1", "height", 50),
    ("img2", "width", 0),
    ("canvas1", "width", 300),
    ("canvas1", "height", 150),
    ("input7", "maxLength", 10),
    ("input7", "size", 5),
    ("input2", "maxLength", -1),
    ("li1", "value", 0),
    ("li2", "value", 10),
    ("meter1", "min", 90),
    ("meter1", "max", 110),
    ("meter1", "low", 95),
    ("meter1", "high", 105),
    ("meter1", "optimum", 100),
    ("object1", "tabIndex", 6),
    ("ol1", "start", 1),
    ("td1", "colSpan", 2),
    ("td1", "rowSpan", 3),
    ("th1", "colSpan", 1),
    ("txtarea1", "rows", 10),
    ("txtarea1", "cols", 12),
    ("txtarea1", "maxLength", 128),
    ("txtarea1", "tabIndex", 4),
    ("col1", "span", 3),
    ("col2", "span", 1),
])
def test_int_properties(gen, elem_id, prop, expected):
    assert getattr(elem(gen, elem_id), prop)() == expected


@pytest.mark.parametrize("elem_id, prop", [
    ("audio2", "crossOrigin"),
    ("img3", "crossOrigin"),
    ("link2", "crossOrigin"),
])
def test_null_properties(gen, elem_id, prop):
    assert getattr(elem(gen, elem_id), prop)() is None


@pytest.mark.parametrize("elem_id, prop, base_url, expected", [
    ("a2", "href", "http://example.com/testpath", ""),
    ("a3", "href", "http://example.com", "http://example.com/relpath"),
    ("a3", "href", "http://example.com/somepath", "http://example.com/relpath"),
    ("a3", "href", "http://example.com/subdir/", "http://example.com/subdir/relpath"),
    ("a4", "href", "http://example.com/", "http://example.com/abspath"),
    ("a4", "href", "http://example.com/subdir/", "http://example.com/abspath"),
    ("a5", "href", "http://example.com/path?a=no-a&c=no-c", "http://example.com/path?a=yes-a&b=yes-b"),
    ("a6", "href", "http://example.com/path#oldfrag", "http://example.com/path#testfrag"),
    ("a7", "href", "http://example.com/prevdir/prevpath", "http://example.com/prtpath"),
    ("a8", "href", "http://example.com/testpath", "http://example.com/testpath"),
    ("base1", "href", "http://example.com", "http://example.com/foo.html"),
    ("base2", "href", "http://example.com", "http://example.com"),
    ("base3", "href", "http://example.com", "http://example.com"),
    ("audio1", "src", "http://example.com", "http://example.com/foo.wav"),
    ("audio2", "src", "http://example.com", ""),
    ("audio3", "src", "http://example.com", "http://example.com"),
    ("form1", "action", "http://example.com/", "http://example.com/submit_url"),
    ("form2", "action", "http://example.com/", ""),
    ("form3", "action", "http://example.com/", "http://example.com/"),
    ("iframe1", "src", "http://example.com", "http://example.com/testframe.html"),
    ("iframe2", "src", "http://example.com", ""),
    ("iframe3", "src", "http://example.com", "http://example.com"),
    ("img1", "src", "http://example.com", "http://example.com/test.png"),
    ("img2", "src", "http://example.com", ""),
    ("img3", "src", "http://example.com", "http://example.com"),
    ("input5", "src", "http://example.com", "http://example.com/input.png"),
    ("input5b", "src", "http://example.com", ""),
    ("input5c", "src", "http://example.com", "http://example.com"),
    ("link1", "href", "http://example.com", "http://example.com/test.css"),
    ("link2", "href", "http://example.com", ""),
    ("link3", "href", "http://example.com", "http://example.com"),
    ("object1", "data", "http://example.com", "http://example.com/test.png"),
    ("object2", "data", "http://example.com", ""),
    ("object3", "data", "http://example.com", "http://example.com"),
    ("script1", "src", "http://example.com", "http://example.com/script.js"),
    ("script2", "src", "http://example.com", ""),
    ("script3", "src", "http://example.com", "http://example.com"),
    ("src1", "src", "http://example.com", "http://example.com/test.png"),
    ("src2", "src", "http://example.com", ""),
    ("src3", "src", "http://example.com", "http://example.com"),
    ("track1", "src", "http://example.com", "http://example.com/foo.en.vtt"),
    ("track3", "src", "http://example.com", ""),
    ("track4", "src", "http://example.com", "http://example.com"),
])
def test_url_properties(elem_id, prop, base_url, expected):
    sel = parse_html(GEN_HTML, base_url)
    assert getattr(elem(sel, elem_id), prop)() == expected


class TestHyperlinks:

    def test_url_parts(self, gen):
        link = elem(gen, "a9")
        assert link.protocol() == "https:"
        assert link.username() == "user"
        assert link.password() == "pw"
        assert link.host() == "example.com:8080"
        assert link.hostname() == "example.com"
        assert link.port() == "8080"
        assert link.pathname() == "/some/path"
        assert link.search() == "?q=1"
        assert link.hash() == "#frag"
        assert link.origin() == "https://example.com:8080"

    def test_url_parts_resolve_against_base(self):
        link = elem(parse_html(GEN_HTML, "http://example.com/dir/page"), "a3")
        assert link.pathname() == "/dir/relpath"
        assert link.host() == "example.com"

    def test_missing_href_has_empty_parts(self, gen):
        link = elem(gen, "a2")
        assert link.host() == ""
        assert link.hash() == ""
        assert link.search() == ""

    def test_rel_list(self, gen):
        assert elem(gen, "a1").rel_list() == ["open"]
        assert elem(gen, "link1").rel_list() == ["alternate", "author"]


class TestForms:

    def test_owner_form(self, gen):
        assert elem(gen, "in_form").form().id() == "form1"
        assert elem(gen, "input_owned").form().id() == "form1"
        assert elem(gen, "input2").form() is None
        assert elem(gen, "legend1").form() is None

    def test_form_overrides_on_control(self, gen):
        button = elem(gen, "btn_override")
        assert button.form_action() == "other_url"
        assert button.form_method() == "get"
        assert button.form_enctype() == "multipart/form-data"
        assert button.form_target() == "_blank"
        assert button.form_no_validate() is True

    def test_form_attributes_from_owner(self, gen):
        control = elem(gen, "in_form")
        assert control.form_action() == "submit_url"
        assert control.form_method() == "post"
        assert control.form_enctype() == "text/plain"
        assert control.form_target() == "__self"
        assert control.form_no_validate() is True

    def test_form_action_resolves_against_base(self):
        sel = parse_html(GEN_HTML, "http://example.com/dir/")
        assert elem(sel, "in_form").form_action() == "http://example.com/dir/submit_url"
        assert elem(sel, "input2").form_action() == "http://example.com/dir/"

    def test_form_defaults_without_owner(self, gen):
        control = elem(gen, "input2")
        assert control.form_action() == ""
        assert control.form_method() == "get"
        assert control.form_enctype() == "application/x-www-form-urlencoded"

    def test_form_elements(self, gen):
        form = elem(gen, "form1")
        assert [e.id() for e in form.elements()] == ["in_form", "btn_override"]
        assert form.length() == 2

    def test_fieldset_elements(self, gen):
        assert [e.id() for e in elem(gen, "fset1").elements()] == ["fset_input", "fset_text"]
        assert elem(gen, "fset2").elements() == []
        assert elem(gen, "fset1").validity() is None

    def test_labels(self, gen):
        assert [label.id() for label in elem(gen, "input1").labels()] == ["label1"]
        assert [label.id() for label in elem(gen, "wrapped_input").labels()] == ["label2"]
        assert elem(gen, "out1").labels() == []

    def test_label_control(self, gen):
        assert elem(gen, "label1").control().id() == "input1"
        assert elem(gen, "label2").control() is None
        assert elem(gen, "label3").control() is None

    def test_input_list(self, gen):
        assert elem(gen, "input7").list().id() == "browsers"
        assert elem(gen, "input8").list() is None
        assert elem(gen, "input2").list() is None


class TestSelectAndOptions:

    def test_select_options(self, gen):
        select = elem(gen, "select1")
        assert select.length() == 3
        assert [o.id() for o in select.options()] == ["opt1", "opt2", "opt3"]
        assert [o.id() for o in select.selected_options()] == ["opt1", "opt3"]
        assert select.selected_index() == 0
        assert select.value() == "Opt 1"

    def test_select_type_and_size(self, gen):
        assert elem(gen, "select1").type() == "select-multiple"
        assert elem(gen, "select1").size() == 4
        assert elem(gen, "select2").type() == "select"
        assert elem(gen, "select2").size() == 1

    def test_select_without_selection(self, gen):
        select = elem(gen, "select2")
        assert select.selected_index() == -1
        assert select.value() == ""

    def test_option_disabled_by_optgroup(self, gen):
        assert elem(gen, "opt1").disabled() is True
        assert elem(gen, "opt2").disabled() is False

    def test_option_properties(self, gen):
        assert elem(gen, "opt1").label() == "Opt 1"
        assert elem(gen, "opt2").label() == "Second"
        assert elem(gen, "opt2").value() == "v2"
        assert elem(gen, "opt1").value() == "Opt 1"
        assert elem(gen, "opt3").index() == 2
        assert elem(gen, "opt3").text() == "Opt 3"
        assert elem(gen, "opt1").form() is None

    def test_datalist(self, gen):
        assert [o.id() for o in elem(gen, "browsers").options()] == ["dl_opt1", "dl_opt2"]
        assert elem(gen, "dl_opt2").index() == 1


class TestTables:

    def test_table_parts(self, gen):
        table = elem(gen, "table1")
        assert table.caption().text_content() == "Cap"
        assert table.thead().node_name() == "thead"
        assert table.tfoot().node_name() == "tfoot"
        assert len(table.tbodies()) == 1
        assert [row.id() for row in table.rows()] == ["tr_head", "tr1", "tr2", "tr_foot"]

    def test_empty_table(self, gen):
        table = elem(gen, "table2")
        assert table.caption() is None
        assert table.thead() is None
        assert table.rows() == []

    def test_camel_case_table_accessors(self, gen):
        table = elem(gen, "table1")
        assert table.tHead().node_name() == "thead"
        assert table.tFoot().node_name() == "tfoot"
        assert len(table.tBodies()) == 1

    def test_row_indices(self, gen):
        assert elem(gen, "tr_head").row_index() == 0
        assert elem(gen, "tr2").row_index() == 2
        assert elem(gen, "tr2").section_row_index() == 1
        assert elem(gen, "tr_foot").section_row_index() == 0

    def test_cells(self, gen):
        assert [c.id() for c in elem(gen, "tr1").cells()] == ["td1", "th1", "th2"]
        assert elem(gen, "th1").cell_index() == 1
        assert elem(gen, "td2").cell_index() == 0

    def test_section_rows(self, gen):
        assert [r.id() for r in elem(gen, "tr_head").parent_element().rows()] == ["tr_head"]


class TestMisc:

    def test_progress(self, gen):
        assert elem(gen, "prog1").max() == 200.0
        assert elem(gen, "prog1").value() == 0.25
        assert elem(gen, "prog1").position() == 0.25
        assert elem(gen, "prog2").max() == 1.0
        assert elem(gen, "prog2").value() == 0.0
        assert elem(gen, "prog2").position() == -1.0
        assert elem(gen, "prog3").value() == 0.25

    @pytest.mark.parametrize("markup", [
        "<progress max='0' value='1'></progress>",
        "<progress max='-3' value='1'></progress>",
        "<progress max='lots' value='1'></progress>",
    ])
    def test_progress_without_usable_max(self, markup):
        progress = parse_html(markup).find("progress").get(0)
        assert progress.max() == 1.0
        assert progress.value() == 1.0
        assert progress.position() == 1.0

    def test_map_areas_and_images(self, gen):
        map_elem = gen.find("map").get(0)
        assert [a.id() for a in map_elem.areas()] == ["area1"]
        assert [i.id() for i in map_elem.images()] == ["img1", "object1"]

    def test_media_text_tracks(self, gen):
        assert [t.id() for t in elem(gen, "audio1").text_tracks()] == ["track0"]
        assert elem(gen, "video1").controls() is True

    def test_script_async_by_javascript_name(self, gen):
        assert getattr(elem(gen, "script1"), "async")() is True

    @pytest.mark.parametrize("elem_id, cls", [
        ("a1", elements.AnchorElement),
        ("area1", elements.AreaElement),
        ("bq1", elements.QuoteElement),
        ("quote1", elements.QuoteElement),
        ("col1", elements.TableColElement),
        ("th1", elements.TableHeaderCellElement),
        ("td1", elements.TableDataCellElement),
        ("select1", elements.SelectElement),
        ("txtarea1", elements.TextAreaElement),
    ])
    def test_factory_picks_tag_class(self, gen, elem_id, cls):
        assert type(elem(gen, elem_id)) is cls
