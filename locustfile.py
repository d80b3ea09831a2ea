# Copyright (c) 2025 Damien Boisvert (AlphaGameDeveloper)
#
# This software is released under the MIT License.
# https://opensource.org/licenses/MIT

"""
Locust load testing configuration for the Archive Backend
Exercises listing, reading, publishing and deleting posts
"""

from locust import HttpUser, task, between
import random
import string

def generate_title():
    """Random but readable post title"""
    words = [''.join(random.choices(string.ascii_lowercase, k=random.randint(3, 9))) for _ in range(4)]
    return "Load Test " + " ".join(words).title()

def generate_content(words=400):
    return " ".join(''.join(random.choices(string.ascii_lowercase, k=6)) for _ in range(words))

class ReaderUser(HttpUser):
    """
    Simulates visitors browsing the archive: list, then open a few posts
    """
    wait_time = between(1, 5)

    def on_start(self):
        self.known_ids = []

    @task(10)
    def list_posts(self):
        response = self.client.get("/api/posts")
        if response.status_code == 200:
            self.known_ids = [post["id"] for post in response.json()]

    @task(6)
    def read_post(self):
        if not self.known_ids:
            return
        post_id = random.choice(self.known_ids)
        self.client.get(f"/api/posts/{post_id}", name="/api/posts/[id]")

    @task(1)
    def read_missing_post(self):
        with self.client.get("/api/posts/does-not-exist", name="/api/posts/[missing]", catch_response=True) as response:
            if response.status_code == 404:
                response.success()

    @task(1)
    def healthcheck(self):
        self.client.get("/api/health")

class WriterUser(HttpUser):
    """
    Simulates an editor publishing a post and later removing it
    """
    wait_time = between(2, 8)

    @task
    def publish_and_delete(self):
        payload = {
            "title": generate_title(),
            "content": generate_content(),
            "tags": ["loadtest"],
            "access": "public"
        }
        response = self.client.post("/api/posts", json=payload)
        if response.status_code != 200:
            return

        post_id = response.json()["filename"].rsplit(".", 1)[0]
        self.client.delete(f"/api/posts/{post_id}", name="/api/posts/[id]")
