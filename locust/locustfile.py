"""
Locust Load Test Suite

Run scenarios:
  locust -f locustfile.py --tags guard       # Bookings racing show updates/deletes
  locust -f locustfile.py --tags throughput  # Search and read paths
  locust -f locustfile.py --tags edge        # Bad input
  locust -f locustfile.py                    # All tests
"""

import random
import string
from datetime import datetime, timezone, timedelta

from locust import HttpUser, task, between, tag, events

# Shared state
SHOW_IDS = []
CATALOGUE = {}

MOVIE_TITLE = "Load Test Movie"
CITY_NAME = "Loadville"


def random_seat():
    return random.choice(string.ascii_uppercase[:12]) + str(random.randint(1, 30))


def show_time(days: int) -> str:
    base = datetime.now(timezone.utc).replace(hour=18, minute=0, second=0, microsecond=0)
    return (base + timedelta(days=days)).isoformat()


@events.test_start.add_listener
def on_test_start(environment, **kwargs):
    print("\n" + "=" * 60)
    print("SETUP: catalogue is created by the first user to start")
    print("=" * 60)


def ensure_catalogue(client):
    """Create one city, partner, theatre and movie shared by all users."""
    if CATALOGUE:
        return

    headers = {"X-Actor": "locust-setup"}
    city = client.post("/api/cities", json={"name": CITY_NAME}, headers=headers)
    if city.status_code == 409:
        city_id = next(c["id"] for c in client.get("/api/cities").json() if c["name"] == CITY_NAME)
    else:
        city_id = city.json()["id"]

    partner_name = "Load Partner " + "".join(random.choices(string.ascii_lowercase, k=6))
    partner_id = client.post("/api/partners", json={"name": partner_name}, headers=headers).json()["id"]

    theatre = client.post(
        "/api/theatres",
        json={"name": "Load Theatre", "cityId": city_id, "partnerId": partner_id},
        headers=headers,
    ).json()
    movie = client.post(
        "/api/movies",
        json={"title": MOVIE_TITLE, "language": "English", "genre": "Drama", "durationInMinutes": 120},
        headers=headers,
    ).json()

    CATALOGUE.update(theatre_id=theatre["id"], movie_id=movie["id"])
    print(f"\n✓ Catalogue ready: theatre {theatre['id']}, movie {movie['id']}\n")


def create_show(client, days: int):
    resp = client.post(
        "/api/shows",
        json={"movieId": CATALOGUE["movie_id"], "theatreId": CATALOGUE["theatre_id"], "showTime": show_time(days)},
    )
    if resp.status_code == 200:
        SHOW_IDS.append(resp.json()["showId"])
        return resp.json()["showId"]
    return None


class GuardRaceUser(HttpUser):
    """
    TEST 1: Bookings racing show mutations

    Run: locust -f locustfile.py --tags guard -u 100 -r 50 --run-time 30s

    After test, verify no show was deleted or moved while it had bookings:
      SELECT b.id FROM bookings b LEFT JOIN shows s ON s.id = b.show_id WHERE s.id IS NULL;
    Should return no rows for shows in the future.
    """
    wait_time = between(0, 0.1)

    def on_start(self):
        ensure_catalogue(self.client)
        if len(SHOW_IDS) < 5:
            create_show(self.client, random.randint(1, 30))

    @tag("guard")
    @task(5)
    def book_seat(self):
        if not SHOW_IDS:
            return
        with self.client.post(
            "/api/bookings",
            json={"showId": random.choice(SHOW_IDS), "customerName": "locust", "seats": [random_seat()]},
            name="/api/bookings",
            catch_response=True,
        ) as resp:
            if resp.status_code in (201, 404, 409):
                resp.success()  # 404: show deleted first, 409: seat taken
            else:
                resp.failure(f"Unexpected: {resp.status_code}")

    @tag("guard")
    @task(1)
    def delete_show(self):
        if not SHOW_IDS:
            return
        show_id = random.choice(SHOW_IDS)
        with self.client.delete(f"/api/shows/{show_id}", name="/api/shows/{id}", catch_response=True) as resp:
            if resp.status_code == 204:
                if show_id in SHOW_IDS:
                    SHOW_IDS.remove(show_id)
                resp.success()
            elif resp.status_code in (404, 409):
                resp.success()  # 409: guard held
            else:
                resp.failure(f"Unexpected: {resp.status_code}")
        create_show(self.client, random.randint(1, 30))


class ThroughputUser(HttpUser):
    """
    TEST 2: Throughput - read paths

    Run: locust -f locustfile.py --tags throughput -u 100 -r 20 --run-time 60s
    """
    wait_time = between(0.1, 0.5)

    def on_start(self):
        ensure_catalogue(self.client)

    @tag("throughput", "read")
    @task(10)
    def search_shows(self):
        day = (datetime.now(timezone.utc) + timedelta(days=random.randint(0, 30))).date().isoformat()
        with self.client.get(
            "/api/shows/search",
            params={"movie": MOVIE_TITLE.lower(), "city": CITY_NAME.upper(), "date": day},
            name="/api/shows/search",
            catch_response=True,
        ) as resp:
            if resp.status_code in (200, 204):
                resp.success()
            else:
                resp.failure(f"Unexpected: {resp.status_code}")

    @tag("throughput", "read")
    @task(3)
    def get_show(self):
        if SHOW_IDS:
            self.client.get(f"/api/shows/{random.choice(SHOW_IDS)}", name="/api/shows/{id}")

    @tag("throughput", "read")
    @task(2)
    def list_shows(self):
        self.client.get("/api/shows")

    @tag("throughput")
    @task(1)
    def health_check(self):
        self.client.get("/health")


class EdgeCaseUser(HttpUser):
    """
    TEST 3: Edge cases - Bad input handling

    Run: locust -f locustfile.py --tags edge -u 20 -r 5 --run-time 30s

    System should NOT crash, return proper error codes.
    """
    wait_time = between(0.5, 1.5)

    def _expect(self, resp, codes):
        if resp.status_code in codes:
            resp.success()
        else:
            resp.failure(f"Expected {codes}, got {resp.status_code}")

    @tag("edge")
    @task
    def unparsable_search_date(self):
        with self.client.get(
            "/api/shows/search",
            params={"movie": "x", "city": "y", "date": "31-31-2031"},
            name="/api/shows/search [bad date]",
            catch_response=True,
        ) as resp:
            self._expect(resp, (400,))

    @tag("edge")
    @task
    def unknown_show(self):
        with self.client.get("/api/shows/999999", name="/api/shows/{id} [missing]", catch_response=True) as resp:
            self._expect(resp, (404,))

    @tag("edge")
    @task
    def unknown_movie(self):
        with self.client.post(
            "/api/shows",
            json={"movieId": 999999, "theatreId": 1, "showTime": show_time(1)},
            name="/api/shows [missing movie]",
            catch_response=True,
        ) as resp:
            self._expect(resp, (404,))

    @tag("edge")
    @task
    def duplicate_seats(self):
        with self.client.post(
            "/api/bookings",
            json={"showId": 1, "customerName": "locust", "seats": ["A1", "A1"]},
            name="/api/bookings [duplicate seats]",
            catch_response=True,
        ) as resp:
            self._expect(resp, (422,))

    @tag("edge")
    @task
    def malformed_json(self):
        with self.client.post(
            "/api/shows",
            data="not json at all",
            headers={"Content-Type": "application/json"},
            name="/api/shows [malformed]",
            catch_response=True,
        ) as resp:
            self._expect(resp, (400, 422))
