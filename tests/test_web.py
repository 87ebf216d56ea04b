"""HTML form and result rendering."""

ASSESS_URL = "/web/assess"


def test_form_page(client):
    response = client.get("/web/")
    assert response.status_code == 200
    assert 'id="change-form"' in response.text
    assert "Testing Confidence" in response.text
    assert 'name="dependency_count"' in response.text


def test_full_page_for_normal_change(client):
    response = client.get(
        ASSESS_URL,
        params={
            "service_down": "false",
            "pre_approved": "false",
            "impact_scope": 3,
            "complexity": 4,
            "reversibility": 2,
            "testing_confidence": 3,
            "deployment_history": 3,
            "timing_sensitivity": 4,
            "dependency_count": 2,
        },
    )
    assert response.status_code == 200
    assert 'id="change-form"' in response.text
    assert '<strong id="composite-score">3.0</strong>' in response.text
    assert "Medium Risk" in response.text
    assert "8. Close RFC" in response.text


def test_htmx_partial_for_emergency(client):
    response = client.get(
        ASSESS_URL,
        params={"service_down": "true", "pre_approved": "false"},
        headers={"HX-Request": "true"},
    )
    assert response.status_code == 200
    assert 'id="change-form"' not in response.text
    assert "Emergency Change Flow" in response.text
    assert "7. Mandatory PIR" in response.text
    assert "composite-score" not in response.text


def test_default_sliders_score_three(client):
    response = client.get(
        ASSESS_URL,
        params={"service_down": "false", "pre_approved": "false"},
        headers={"HX-Request": "true"},
    )
    assert response.status_code == 200
    assert '<strong id="composite-score">3.0</strong>' in response.text


def test_score_out_of_range(client):
    response = client.get(
        ASSESS_URL,
        params={"service_down": "false", "pre_approved": "false", "complexity": 9},
    )
    assert response.status_code == 422
