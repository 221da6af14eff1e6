"""Tests for the revenue table page and its toolbar."""

from unittest.mock import patch

import pytest
from fastapi import status
from fastapi.testclient import TestClient

from gudang_admin.services.backend import BackendAPIError
from tests.helpers import mock_backend

REVENUE = [
    {"id": 1, "jenisPenerimaan": "Penjualan", "jumlah": 150000, "sumberPenerimaan": "Toko Pusat"},
    {"id": 2, "jenisPenerimaan": "Hibah", "jumlah": 5000, "sumberPenerimaan": "Pemerintah"},
]


@pytest.fixture
def backend():
    with patch("gudang_admin.api.revenue.BackendClient") as mock_client_class:
        mock_client_class.return_value = mock_backend(list_revenue=REVENUE)
        yield mock_client_class


class TestRevenueTable:
    """Tests for GET /penerimaan."""

    def test_lists_all_records(self, client: TestClient, backend) -> None:
        response = client.get("/penerimaan")

        assert response.status_code == status.HTTP_200_OK
        assert 'id="penerimaan-1"' in response.text
        assert 'id="penerimaan-2"' in response.text
        assert 'placeholder="Search by all"' in response.text

    def test_search_and_category_filter(self, client: TestClient, backend) -> None:
        response = client.get("/penerimaan", params={"kategori": "sumber", "q": "pemerintah"})

        assert 'id="penerimaan-2"' in response.text
        assert 'id="penerimaan-1"' not in response.text
        assert 'value="pemerintah"' in response.text
        assert 'placeholder="Search by sumber"' in response.text

    def test_refresh_clears_search(self, client: TestClient, backend) -> None:
        """Test a refresh resets the search box echo."""
        response = client.get(
            "/penerimaan", params={"kategori": "sumber", "q": "ABC", "aksi": "refresh"}
        )

        assert 'value="ABC"' not in response.text
        assert 'class="search-bar" placeholder="Search by all" value=""' in response.text
        assert 'id="penerimaan-1"' in response.text

    def test_add_shows_notification(self, client: TestClient, backend) -> None:
        response = client.get("/penerimaan", params={"aksi": "add"})
        assert "Penambahan penerimaan belum tersedia." in response.text

    def test_unknown_category_falls_back_to_all(self, client: TestClient, backend) -> None:
        response = client.get("/penerimaan", params={"kategori": "bogus", "q": "hibah"})
        assert 'id="penerimaan-2"' in response.text
        assert 'placeholder="Search by all"' in response.text

    def test_fetch_failure_shows_empty_state(self, client: TestClient) -> None:
        with patch("gudang_admin.api.revenue.BackendClient") as mock_client_class:
            mock_client_class.return_value = mock_backend(
                list_revenue=BackendAPIError("Request failed")
            )
            response = client.get("/penerimaan")

        assert response.status_code == status.HTTP_200_OK
        assert "Tidak ada data penerimaan." in response.text

    def test_without_session_redirects(self, anon_client: TestClient) -> None:
        response = anon_client.get("/penerimaan", follow_redirects=False)
        assert response.status_code == status.HTTP_303_SEE_OTHER
