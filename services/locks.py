"""
Per-Student Locks

Serializes plan generation for one student inside this process so the
delete-then-insert of the day's log can't interleave. Different students
never wait on each other.
"""

import threading
import weakref
from contextlib import contextmanager

_registry_lock = threading.Lock()
_student_locks = weakref.WeakValueDictionary()


def get_student_lock(student_id):
    """Return the lock for `student_id`, creating it on first use."""
    with _registry_lock:
        lock = _student_locks.get(student_id)
        if lock is None:
            lock = threading.Lock()
            _student_locks[student_id] = lock
        return lock


@contextmanager
def student_lock(student_id):
    lock = get_student_lock(student_id)
    with lock:
        yield
