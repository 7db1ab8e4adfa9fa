"""Run a quick in-process check against the app.

Creates, reads, updates and deletes a student through FastAPI's
TestClient and prints each status code. Nothing is kept afterwards: the
collection lives in the throwaway app built here.
"""

import os
import sys

# Ensure backend folder is on sys.path so `student_directory` can be imported
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from fastapi.testclient import TestClient
from student_directory.main import create_app


def main():
    client = TestClient(create_app())
    resp = client.get('/api/students')
    print('LIST:', resp.status_code, len(resp.json()), 'students')
    resp = client.post('/api/students', json={'name': 'Luis', 'age': 19, 'major': 'Arte'})
    print('CREATE:', resp.status_code, resp.json())
    sid = resp.json()['id']
    resp = client.put(f'/api/students/{sid}', json={'name': 'Luis', 'age': 20, 'major': 'Arte'})
    print('UPDATE:', resp.status_code, resp.json())
    resp = client.delete(f'/api/students/{sid}')
    print('DELETE:', resp.status_code)
    resp = client.get(f'/api/students/{sid}')
    print('GET AFTER DELETE:', resp.status_code, resp.json())


if __name__ == '__main__':
    main()
