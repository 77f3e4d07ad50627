import pytest
from fastapi import status
from appraisal_api.models.appraisal import Appraisal
from appraisal_api.models.employee import Employee
from appraisal_api.services.base import BaseService

def _error(response):
    return response.json()["errors"][0]

def test_add_employee(client, reference_data, alice):
    response = client.post("/team4/employee", json=alice)
    assert response.status_code == status.HTTP_201_CREATED
    assert response.json() == {
        "empId": 1, "empName": "Alice", "review": 1, "band": "B1", "salary": 100000.0
    }

def test_add_accepts_snake_case_fields(client, reference_data):
    response = client.post(
        "/team4/employee",
        json={"emp_id": 7, "emp_name": "Grace", "review": 2, "band": "B2", "salary": 1},
    )
    assert response.status_code == status.HTTP_201_CREATED
    assert response.json()["empName"] == "Grace"

def test_add_duplicate_is_conflict(client, reference_data, alice):
    client.post("/team4/employee", json=alice)
    response = client.post("/team4/employee", json={**alice, "empName": "Impostor"})
    assert response.status_code == status.HTTP_409_CONFLICT
    assert _error(response)["msg"] == "Employee already exists"
    assert client.get("/team4/employee/1").json()["empName"] == "Alice"

def test_add_with_unknown_band_is_bad_request(client, db_session, reference_data, alice):
    response = client.post("/team4/employee", json={**alice, "band": "ZZ", "review": 99})
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert _error(response)["msg"] == "Invalid band ID"
    assert db_session.query(Employee).count() == 0

def test_add_with_unknown_review_is_bad_request(client, reference_data, alice):
    response = client.post("/team4/employee", json={**alice, "review": 99})
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert _error(response)["msg"] == "Invalid review ID"

def test_negative_salary_is_rejected(client, reference_data, alice):
    response = client.post("/team4/employee", json={**alice, "salary": -1})
    assert response.status_code == 422
    assert response.json()["errors"][0]["field"] == "salary"

def test_get_employee(client, reference_data, alice):
    client.post("/team4/employee", json=alice)
    response = client.get("/team4/employee/1")
    assert response.status_code == status.HTTP_200_OK
    assert response.json()["band"] == "B1"

def test_get_missing_employee(client):
    response = client.get("/team4/employee/404")
    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert _error(response)["msg"] == "Employee not found"

def test_list_employees(client, reference_data, alice):
    assert client.get("/team4/employee").status_code == status.HTTP_204_NO_CONTENT
    client.post("/team4/employee", json=alice)
    client.post("/team4/employee", json={**alice, "empId": 2, "empName": "Bob"})
    response = client.get("/team4/employee")
    assert response.status_code == status.HTTP_200_OK
    assert [e["empName"] for e in response.json()] == ["Alice", "Bob"]

def test_update_employee(client, reference_data, alice):
    client.post("/team4/employee", json=alice)
    response = client.put(
        "/team4/employee/1",
        json={"empName": "Alice Smith", "review": 2, "band": "B2", "salary": 120000},
    )
    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {
        "empId": 1, "empName": "Alice Smith", "review": 2, "band": "B2", "salary": 120000.0
    }
    assert client.get("/team4/employee/1").json()["salary"] == 120000.0

def test_update_missing_employee(client, reference_data, alice):
    response = client.put("/team4/employee/9", json=alice)
    assert response.status_code == status.HTTP_404_NOT_FOUND

def test_update_with_unknown_band(client, reference_data, alice):
    client.post("/team4/employee", json=alice)
    response = client.put("/team4/employee/1", json={**alice, "band": "ZZ"})
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert client.get("/team4/employee/1").json()["band"] == "B1"

def test_update_with_no_affected_rows_is_not_modified(client, reference_data, alice, monkeypatch):
    client.post("/team4/employee", json=alice)
    monkeypatch.setattr(BaseService, "_execute", lambda self, statement: 0)
    response = client.put("/team4/employee/1", json={**alice, "salary": 1})
    assert response.status_code == status.HTTP_304_NOT_MODIFIED
    assert response.headers["X-Error-Message"] == "Update failed"

def test_delete_employee(client, reference_data, alice):
    client.post("/team4/employee", json=alice)
    response = client.delete("/team4/employee/1")
    assert response.status_code == status.HTTP_200_OK
    assert response.json()["empName"] == "Alice"
    assert client.get("/team4/employee/1").status_code == status.HTTP_404_NOT_FOUND

def test_delete_missing_employee(client):
    assert client.delete("/team4/employee/1").status_code == status.HTTP_404_NOT_FOUND

def test_delete_cascades_to_appraisal(client, db_session, reference_data, alice):
    client.post("/team4/employee", json=alice)
    client.post("/team4/appraisal", json=alice)

    response = client.delete("/team4/employee/1")
    assert response.status_code == status.HTTP_200_OK
    assert client.get("/team4/employee/1").status_code == status.HTTP_404_NOT_FOUND
    assert client.get("/team4/appraisal/1").status_code == status.HTTP_404_NOT_FOUND
    assert db_session.query(Appraisal).count() == 0

def test_delete_with_no_affected_rows_keeps_both_rows(client, db_session, reference_data, alice, monkeypatch):
    client.post("/team4/employee", json=alice)
    client.post("/team4/appraisal", json=alice)
    monkeypatch.setattr(BaseService, "_execute", lambda self, statement: 0)

    response = client.delete("/team4/employee/1")
    assert response.status_code == status.HTTP_304_NOT_MODIFIED
    assert db_session.query(Employee).count() == 1
    assert db_session.query(Appraisal).count() == 1

def test_cascade_with_no_affected_appraisal_rows_rolls_back_employee(client, db_session, reference_data, alice, monkeypatch):
    """The employee delete succeeds, the appraisal delete touches nothing: both must survive."""
    client.post("/team4/employee", json=alice)
    client.post("/team4/appraisal", json=alice)

    real_execute = BaseService._execute

    def skip_appraisal_writes(self, statement):
        if statement.table.name == "appraisal":
            return 0
        return real_execute(self, statement)

    monkeypatch.setattr(BaseService, "_execute", skip_appraisal_writes)
    response = client.delete("/team4/employee/1")
    assert response.status_code == status.HTTP_304_NOT_MODIFIED
    assert response.headers["X-Error-Message"] == "Delete failed"
    assert db_session.query(Employee).count() == 1
    assert db_session.query(Appraisal).count() == 1

@pytest.mark.parametrize("emp_id", [2**31, 2**70, -1])
def test_out_of_range_id_is_rejected(client, db_session, reference_data, alice, emp_id):
    response = client.post("/team4/employee", json={**alice, "empId": emp_id})
    assert response.status_code == 422
    assert response.json()["errors"][0]["field"] == "empId"
    assert db_session.query(Employee).count() == 0

def test_out_of_range_path_id_is_rejected(client):
    assert client.get(f"/team4/employee/{2**70}").status_code == 422
    assert client.delete(f"/team4/employee/{2**70}").status_code == 422

def test_bad_request_carries_rejected_references(client, reference_data, alice):
    response = client.post("/team4/employee", json={**alice, "band": "ZZ"})
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert _error(response)["details"] == {"band": "ZZ", "review": 1}
