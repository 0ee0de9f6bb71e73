"""
Unit Tests: Storage adapter (single-key JSON persistence)
"""
import json
import logging
import threading

import pytest

from models.task import TaskRecord, TaskStatus
from services.storage_adapter import DEFAULT_STORAGE_KEY, StorageAdapter


class TestSave:

    def test_writes_json_array_under_one_key(self, storage, memory_backend):
        storage.save([TaskRecord(text='Learn Cypress'), TaskRecord(text='Learn Vue', status=TaskStatus.DONE)])

        stored = json.loads(memory_backend.get(DEFAULT_STORAGE_KEY))
        assert stored == [
            {'text': 'Learn Cypress', 'status': 'pending'},
            {'text': 'Learn Vue', 'status': 'done'},
        ]

    def test_replaces_previous_value(self, storage, memory_backend):
        storage.save([TaskRecord(text='one'), TaskRecord(text='two')])
        storage.save([TaskRecord(text='three')])

        assert json.loads(memory_backend.get(DEFAULT_STORAGE_KEY)) == [{'text': 'three', 'status': 'pending'}]

    def test_custom_key(self, memory_backend):
        adapter = StorageAdapter(memory_backend, key='todos-v1')
        adapter.save([TaskRecord(text='x')])

        assert memory_backend.get('todos-v1') is not None
        assert memory_backend.get(DEFAULT_STORAGE_KEY) is None

    def test_concurrent_writers_leave_one_complete_value(self, storage, memory_backend):
        lists = [[TaskRecord(text=f'writer {n} task {i}') for i in range(20)] for n in range(8)]
        threads = [threading.Thread(target=storage.save, args=(tasks,)) for tasks in lists]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        loaded = storage.load()
        assert loaded in lists


class TestLoad:

    def test_absent_key_is_empty(self, storage):
        assert storage.load() == []

    @pytest.mark.parametrize('tasks', [
        [],
        [TaskRecord(text='Learn Cypress')],
        [TaskRecord(text='a', status=TaskStatus.DOING), TaskRecord(text='b', status=TaskStatus.DONE)],
        [TaskRecord(id=1, text='Mocked Task 1'), TaskRecord(text='local task')],
    ])
    def test_round_trip(self, storage, tasks):
        storage.save(tasks)
        assert storage.load() == tasks

    @pytest.mark.parametrize('raw', [
        '{not json',
        '',
        '{"text": "x", "status": "pending"}',
        '"just a string"',
        '[{"text": "x", "status": "someday"}]',
        '[{"text": "", "status": "pending"}]',
        '[{"text": "ok", "status": "done"}, 17]',
    ])
    def test_malformed_content_falls_back_to_empty(self, storage, memory_backend, caplog, raw):
        memory_backend.set(DEFAULT_STORAGE_KEY, raw)

        with caplog.at_level(logging.WARNING, logger='services.storage_adapter'):
            assert storage.load() == []

        assert any('starting empty' in r.message for r in caplog.records)

    def test_clear_removes_key(self, storage, memory_backend):
        storage.save([TaskRecord(text='x')])
        storage.clear()

        assert memory_backend.get(DEFAULT_STORAGE_KEY) is None
        assert storage.load() == []
