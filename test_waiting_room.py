import pytest
from patient_system.models import Patient, PatientIdGenerator
from patient_system.waiting_room import WaitingQueue


def setup_queue(*names):
    q = WaitingQueue()
    patients = [q.enqueue(q.new_patient(n, "checkup")) for n in names]
    return q, patients


def test_fifo_dequeue():
    q, (a, b) = setup_queue("A", "B")
    assert q.dequeue_next() == a
    assert q.size() == 1
    assert list(q) == [b]


def test_dequeue_empty_returns_none():
    q = WaitingQueue()
    assert q.is_empty()
    assert q.dequeue_next() is None
    assert q.peek() is None


def test_emergency_insert_in_the_middle():
    q, (a, b) = setup_queue("A", "B")
    c = q.new_patient("C", "chest pain")
    assert q.insert_at(c, 1) is True
    assert list(q) == [a, c, b]
    assert q.peek() == a


def test_insert_at_bounds():
    q, _ = setup_queue("A", "B")
    assert q.insert_at(q.new_patient("front", "x"), 0)
    assert q.insert_at(q.new_patient("back", "x"), q.size())
    assert [p.name for p in q] == ["front", "A", "B", "back"]


@pytest.mark.parametrize("position", [-1, -10, 3, 50])
def test_insert_out_of_range_fails_without_mutation(position):
    q, patients = setup_queue("A", "B")
    assert q.insert_at(q.new_patient("C", "x"), position) is False
    assert q.size() == 2
    assert list(q) == patients


def test_none_patient_rejected():
    q = WaitingQueue()
    with pytest.raises(ValueError):
        q.enqueue(None)
    with pytest.raises(ValueError):
        q.insert_at(None, 0)
    assert q.is_empty()


def test_ids_come_from_queue_generator():
    q1 = WaitingQueue()
    q2 = WaitingQueue(PatientIdGenerator(prefix="E", start=100))
    assert [q1.new_patient("x", "y").id for _ in range(3)] == ["P1", "P2", "P3"]
    assert q2.new_patient("x", "y").id == "E100"
    # second default queue starts over: no shared global counter
    assert WaitingQueue().new_patient("x", "y").id == "P1"


def test_negative_id_start_rejected():
    with pytest.raises(ValueError):
        PatientIdGenerator(start=-1)


def test_render_all():
    q = WaitingQueue()
    assert q.render_all() == ""
    q.enqueue(Patient("P7", "Ann", "flu"))
    q.enqueue(Patient("P8", "Bob", "cough"))
    assert q.render_all() == (
        "Patient Waiting Queue:\n"
        "Patient { id=P7, name='Ann', reasonForVisit=flu}\n"
        "Patient { id=P8, name='Bob', reasonForVisit=cough}\n"
    )
