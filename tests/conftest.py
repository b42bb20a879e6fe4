"""Shared fixtures for the pagequery test suite."""

import pytest

from pagequery import parse_html

ELEMENT_HTML = """
<html>
<head>
	<title>This is the title</title>
</head>
<body>
	<h1 id="top">Lorem ipsum</h1>
	<empty></empty>
	<p>Lorem ipsum dolor sit amet, consectetur adipiscing elit.</p>
	<p>Lorem ipsum dolor sit amet, consectetur adipiscing elit.</p>
	pretext
	<div id="div_elem" class="class1 class2" lang="en">
		innerfirst
		<h2 id="h2_elem" class="class2">Nullam id nisi eget ex pharetra imperdiet.</h2>
		<span id="span1"><b>test content</b></span>
		<svg id="svg_elem"></svg>
		<span id="span2">Maecenas augue ligula, aliquet sit amet maximus ut, vestibulum et magna</span>
		innerlast
	</div>
	aftertext
	<footer>This is the footer.</footer>
</body>
"""

LIST_HTML = """<html><head><title>List</title></head><body>
<div id="outer" class="box">
  <ul id="list">
    <li id="i1" class="item odd">One</li>
    <li id="i2" class="item even">Two</li>
    <li id="i3" class="item odd special">Three</li>
    <li id="i4" class="item even">Four</li>
    <li id="i5" class="item odd">Five</li>
  </ul>
  <p id="para">Some <em>emphasised</em> text<!-- a comment --></p>
</div>
<div id="other"><span class="item">Other</span></div>
</body></html>"""

FORM_HTML = """<html><body>
<form id="form1" action="/submit" method="POST">
  <input type="text" name="username" value="alice">
  <input type="password" name="password" value="secret">
  <input type="checkbox" name="remember" checked>
  <input type="checkbox" name="newsletter" value="yes">
  <input type="radio" name="color" value="red">
  <input type="radio" name="color" value="blue" checked>
  <input type="submit" name="go" value="Go">
  <input type="file" name="upload">
  <input type="text" name="locked" value="x" disabled>
  <input type="text" value="anonymous">
  <select name="single"><option value="a">A</option><option value="b" selected>B</option></select>
  <select name="multi" multiple><option selected>one</option><option>two</option><option value="3" selected>three</option></select>
  <select name="fallback"><option value="first">First</option><option value="second">Second</option></select>
  <textarea name="comment">Hello there</textarea>
  <button name="btn" value="clicked">Click</button>
</form>
<input id="outside" type="text" name="outside" value="o" form="form1">
</body></html>"""


@pytest.fixture
def doc():
    """A document exercising text nodes, foreign content and nesting."""
    return parse_html(ELEMENT_HTML)


@pytest.fixture
def list_doc():
    """A document with a flat list for traversal tests."""
    return parse_html(LIST_HTML)


@pytest.fixture
def form_doc():
    """A document with a form holding every kind of control."""
    return parse_html(FORM_HTML)
