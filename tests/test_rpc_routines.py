from tests.conftest import uniq_email


def make_user(client):
    r = client.post("/rpc/createUser", json={"email": uniq_email(), "password": "secret1", "name": "R"})
    assert r.status_code == 201, r.text
    return r.json()["id"]

def make_routine(client, user_id, name="Push Day", description=None):
    r = client.post("/rpc/createWorkoutRoutine",
                    json={"user_id": user_id, "name": name, "description": description})
    assert r.status_code == 201, r.text
    return r.json()


def test_create_routine_and_exercises(client):
    uid = make_user(client)
    routine = make_routine(client, uid, description="Chest and triceps")
    assert routine["user_id"] == uid
    assert routine["description"] == "Chest and triceps"

    r = client.post("/rpc/createExercise",
                    json={"routine_id": routine["id"], "name": "Bench", "order_index": 0})
    assert r.status_code == 201
    assert r.json()["routine_id"] == routine["id"]

def test_description_optional(client):
    uid = make_user(client)
    r = client.post("/rpc/createWorkoutRoutine", json={"user_id": uid, "name": "No desc"})
    assert r.status_code == 201
    assert r.json()["description"] is None

def test_routine_for_unknown_user_409(client):
    r = client.post("/rpc/createWorkoutRoutine", json={"user_id": 999999, "name": "x"})
    assert r.status_code == 409

def test_exercise_for_unknown_routine_409(client):
    r = client.post("/rpc/createExercise", json={"routine_id": 999999, "name": "x", "order_index": 0})
    assert r.status_code == 409

def test_exercise_validation_422(client):
    uid = make_user(client)
    rid = make_routine(client, uid)["id"]
    assert client.post("/rpc/createExercise",
                       json={"routine_id": rid, "name": "x", "order_index": -1}).status_code == 422
    assert client.post("/rpc/createExercise",
                       json={"routine_id": rid, "name": "", "order_index": 0}).status_code == 422

def test_get_routines_with_ordered_exercises(client):
    uid = make_user(client)
    rid = make_routine(client, uid)["id"]
    for name, idx in [("Dips", 2), ("Bench", 0), ("Incline", 1)]:
        client.post("/rpc/createExercise", json={"routine_id": rid, "name": name, "order_index": idx})
    make_routine(client, uid, name="Empty")

    r = client.get("/rpc/getUserWorkoutRoutines", params={"userId": uid})
    assert r.status_code == 200
    routines = {x["name"]: x for x in r.json()}
    assert [e["name"] for e in routines["Push Day"]["exercises"]] == ["Bench", "Incline", "Dips"]
    assert routines["Empty"]["exercises"] == []

def test_get_routines_empty_and_isolated(client):
    a, b = make_user(client), make_user(client)
    make_routine(client, a)
    assert client.get("/rpc/getUserWorkoutRoutines", params={"userId": b}).json() == []
    assert len(client.get("/rpc/getUserWorkoutRoutines", params={"userId": a}).json()) == 1

def test_get_routines_requires_user_id(client):
    assert client.get("/rpc/getUserWorkoutRoutines").status_code == 422
    assert client.get("/rpc/getUserWorkoutRoutines", params={"userId": "abc"}).status_code == 422

def test_get_routines_newest_first(client):
    uid = make_user(client)
    for name in ("first", "second", "third"):
        make_routine(client, uid, name=name)
    r = client.get("/rpc/getUserWorkoutRoutines", params={"userId": uid})
    assert [x["name"] for x in r.json()] == ["third", "second", "first"]

def test_out_of_range_ids_422(client):
    too_big = 2**63
    assert client.post("/rpc/createWorkoutRoutine", json={"user_id": too_big, "name": "x"}).status_code == 422
    assert client.post("/rpc/createExercise",
                       json={"routine_id": too_big, "name": "x", "order_index": 0}).status_code == 422
    assert client.get("/rpc/getUserWorkoutRoutines", params={"userId": too_big}).status_code == 422

def test_order_index_upper_bound(client):
    uid = make_user(client)
    rid = make_routine(client, uid)["id"]
    assert client.post("/rpc/createExercise",
                       json={"routine_id": rid, "name": "x", "order_index": 2**31}).status_code == 422
    assert client.post("/rpc/createExercise",
                       json={"routine_id": rid, "name": "x", "order_index": 2**31 - 1}).status_code == 201
