from pathlib import Path

import pytest

from lxml_selection import Document


FILES_PATH = Path(__file__).parent / "files"


@pytest.fixture
def files_path():
    return FILES_PATH


@pytest.fixture
def form_document():
    return Document(
        """\
        <form>
            <input type="text" name="title" value="Treasure Island">
            <input type="hidden" name="token" value="Xy7">
            <input type="checkbox" name="hardcover" checked>
            <input type="radio" name="language" value="en">
            <input type="radio" name="language" value="de" checked>
            <select name="genre">
                <option value="adventure">Adventure</option>
                <option value="pirates" selected>Pirates</option>
            </select>
            <textarea name="notes">Yo-ho-ho &amp; a bottle of rum</textarea>
        </form>
        """
    )


@pytest.fixture
def sample_document():
    return Document(
        '<div id="main" class="content wide">'
        "<p>Lorem ipsum <b>dolor</b> sit amet</p>"
        "<!-- consectetur -->"
        '<p class="note">adipiscing <i>elit</i></p>'
        "</div>"
    )
