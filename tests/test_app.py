import pytest
from jinja2 import DictLoader, TemplateNotFound

from app import create_app
from calendar_month import MalformedNotation


def test_default_month(client):
    resp = client.get("/")

    assert resp.status_code == 200
    assert resp.mimetype == "text/html"
    html = resp.get_data(as_text=True)
    assert "<h1>Март 2017</h1>" in html
    assert '<td class="weekend">4</td>' in html
    assert '<td class="weekend">5</td>' in html
    assert "<td>1</td>" in html


def test_requested_month(client):
    html = client.get("/?month=2021-12").get_data(as_text=True)

    assert "<h1>Декабрь 2021</h1>" in html
    assert "<td>31</td>" in html
    assert "month=2021-11" in html
    assert "month=2022-01" in html


@pytest.mark.parametrize("notation", ["not-a-date", "2021", "", "2021-13", "0-01"])
def test_bad_month_falls_back(client, notation):
    resp = client.get("/", query_string={"month": notation})

    assert resp.status_code == 200
    assert "<h1>Март 2017</h1>" in resp.get_data(as_text=True)


def test_short_last_week_is_not_padded(client):
    html = client.get("/?month=2017-03").get_data(as_text=True)

    rows = html.split("<tbody>")[1].split("</tbody>")[0].split("<tr>")[1:]
    assert len(rows) == 5
    assert [row.count("<td") for row in rows] == [7, 7, 7, 7, 5]


def test_template_error_is_returned_as_body(app):
    app.jinja_env.loader = DictLoader({"index.html": "{{ month.grid.nope() }}"})

    resp = app.test_client().get("/")

    assert resp.status_code == 200
    assert resp.mimetype == "text/html"
    assert "nope" in resp.get_data(as_text=True)


def test_missing_template_fails_at_startup():
    with pytest.raises(TemplateNotFound):
        create_app({"CALENDAR_TEMPLATE": "missing.html"})


def test_invalid_default_month_fails_at_startup():
    with pytest.raises(MalformedNotation):
        create_app({"CALENDAR_DEFAULT_MONTH": "march"})
