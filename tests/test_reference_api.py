import pytest
from fastapi import status

def test_empty_bands_return_no_content(client):
    response = client.get("/team4/band")
    assert response.status_code == status.HTTP_204_NO_CONTENT
    assert response.content == b""

def test_empty_reviews_return_no_content(client):
    assert client.get("/team4/review").status_code == status.HTTP_204_NO_CONTENT

def test_list_bands(client, reference_data):
    response = client.get("/team4/band")
    assert response.status_code == status.HTTP_200_OK
    assert response.json() == [
        {"bandId": "B1", "bandMul": 0.10},
        {"bandId": "B2", "bandMul": 0.20},
    ]

def test_list_reviews(client, reference_data):
    response = client.get("/team4/review")
    assert response.status_code == status.HTTP_200_OK
    assert [r["revId"] for r in response.json()] == [1, 2]

def test_get_single_band_and_review(client, reference_data):
    assert client.get("/team4/band/B2").json()["bandMul"] == pytest.approx(0.20)
    assert client.get("/team4/review/2").json()["revMul"] == pytest.approx(0.50)

def test_unknown_reference_is_not_found(client, reference_data):
    response = client.get("/team4/band/ZZ")
    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json()["errors"][0]["code"] == "NOT_FOUND"
    assert client.get("/team4/review/99").status_code == status.HTTP_404_NOT_FOUND
