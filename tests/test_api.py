"""
HTTP surface – JSON API + server-rendered form, via FastAPI's TestClient.
"""
import pytest
from fastapi.testclient import TestClient

from core.meal_selector import SNACKS, MealSelector
from core.recommendation import RecommendationEngine
from core.validation import HEIGHT_MESSAGE, WEIGHT_MESSAGE
from main import app
from services.engine import get_engine


class FirstChoice:
    def choice(self, seq):
        return seq[0]


@pytest.fixture
def client():
    app.dependency_overrides[get_engine] = lambda: RecommendationEngine(MealSelector(FirstChoice()))
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


BODY = {
    "name": "Sam",
    "age": "25",
    "gender": "male",
    "weight": "70",
    "height": "175",
    "activity": "moderate",
    "diet_pref": "balanced",
    "goal": "maintain",
}


def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json()["status"] == "ok"


def test_recommendation_ok(client):
    r = client.post("/api/v1/recommendations", json=BODY)
    assert r.status_code == 200
    data = r.json()
    assert data["bmi"] == 22.9
    assert data["bmi_category"] == "Healthy weight"
    assert data["tdee"] == 2594
    assert data["target_calories"] == 2594
    assert data["macro_grams"] == {"carb": 324, "protein": 130, "fat": 86}
    assert data["meals"]["snack"] == SNACKS[0]
    assert len(data["tips"]) == 5
    assert data["goal_label"] == "Maintain / Improve habits"


def test_recommendation_validation_errors(client):
    r = client.post("/api/v1/recommendations", json={**BODY, "weight": "10", "height": "300"})
    assert r.status_code == 422
    assert r.json()["detail"]["errors"] == [WEIGHT_MESSAGE, HEIGHT_MESSAGE]


def test_options(client):
    data = client.get("/api/v1/options").json()
    assert [o["value"] for o in data["activity"]] == ["sedentary", "light", "moderate", "active", "very"]
    assert {o["value"] for o in data["goal"]} == {"lose", "gain", "maintain"}


def test_form_get_is_empty(client):
    r = client.get("/")
    assert r.status_code == 200
    assert 'id="healthForm"' in r.text
    assert 'class="result visually-hidden"' in r.text


def test_form_post_renders_result(client):
    form = {**BODY, "dietPref": "keto"}
    form.pop("diet_pref")
    r = client.post("/", data=form)
    assert r.status_code == 200
    assert "Hi Sam, here are your personalised recommendations" in r.text
    assert "5% carbs • 25% protein • 70% fat" in r.text


def test_form_post_renders_errors(client):
    r = client.post("/", data={"age": "130", "weight": "70", "height": "175"})
    assert "Please fix these:" in r.text
    assert "valid age" in r.text


def test_reset_redirects_to_blank_form(client):
    r = client.get("/reset", follow_redirects=False)
    assert r.status_code == 303
    assert r.headers["location"] == "/"


def test_macro_grams_are_json_integers(client):
    r = client.post("/api/v1/recommendations", json=BODY)
    grams = r.json()["macro_grams"]
    assert all(type(v) is int for v in grams.values())
    assert '"macro_grams":{"carb":324,"protein":130,"fat":86}' in r.text


def test_form_survives_huge_age(client):
    r = client.post("/", data={"age": "9" * 5000, "weight": "70", "height": "175"})
    assert r.status_code == 200
    assert "Please fix these:" in r.text
