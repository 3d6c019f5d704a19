import pytest


def test_get_holy_days(client):
    response = client.get('/holydays/2024')
    assert response.status_code == 200
    body = response.get_json()
    assert body["year"] == 2024
    assert body["holy_days"] == {
        "Easter Sunday": "2024-03-31",
        "Ash Wednesday": "2024-02-14",
        "Pentecost": "2024-05-19",
        "Trinity Sunday": "2024-05-26",
        "Annunciation of Mary": "2024-03-25",
    }


@pytest.mark.parametrize('year', ['1582', '10000', 'abc', '20_24', '99999999999999999999'])
def test_get_holy_days_invalid_year(client, year):
    response = client.get(f'/holydays/{year}')
    assert response.status_code == 400
    assert response.get_data(as_text=True) == "Invalid year: expected 1583-9999\n"


def test_get_easter_range(client):
    response = client.get('/easter/2024/2026')
    assert response.status_code == 200
    assert response.get_json() == {
        "start_year": 2024,
        "end_year": 2026,
        "easter": {"2024": "2024-03-31", "2025": "2025-04-20", "2026": "2026-04-05"},
    }


@pytest.mark.parametrize('path', ['/easter/2026/2024', '/easter/1500/1600', '/easter/2000/3000'])
def test_get_easter_range_invalid(client, path):
    assert client.get(path).status_code == 400


def test_holy_days_are_listed(client):
    listing = client.get('/routes').get_data(as_text=True)
    assert 'GET /holydays/*\n' in listing
    assert 'GET /easter/*/*\n' in listing
