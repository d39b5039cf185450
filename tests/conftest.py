"""
Pytest configuration and fixtures for LoginSentry tests.

This module provides reusable fixtures for testing all components.
"""

import pytest
import os
import tempfile
import shutil


def make_line(time, user, ip, month="Jun", day="10"):
    """Build an sshd log line with the user and IP in their expected columns."""
    return f"{month} {day} {time} server sshd[4242]: Accepted password for {user} from {ip} port 22 ssh2"


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    temp_path = tempfile.mkdtemp()
    yield temp_path
    shutil.rmtree(temp_path)


@pytest.fixture
def temp_csv_file(temp_dir):
    """Create a temporary CSV file path."""
    csv_path = os.path.join(temp_dir, "test_alerts.csv")
    yield csv_path


@pytest.fixture
def lookup_files(temp_dir):
    """Write banned_ips.txt and authorized_users.txt into a temporary directory."""
    banned_path = os.path.join(temp_dir, "banned_ips.txt")
    authorized_path = os.path.join(temp_dir, "authorized_users.txt")

    with open(banned_path, 'w') as f:
        f.write("10.0.0.5 203.0.113.9\n198.51.100.23\n")
    with open(authorized_path, 'w') as f:
        f.write("alice\ncarol  dave\n")

    return {'banned': banned_path, 'authorized': authorized_path}


@pytest.fixture
def burst_lines():
    """Four logins by bob within 18 seconds from a non-banned IP."""
    return [
        make_line("10:00:00", "bob", "192.168.1.20"),
        make_line("10:00:05", "bob", "192.168.1.20"),
        make_line("10:00:10", "bob", "192.168.1.20"),
        make_line("10:00:18", "bob", "192.168.1.20"),
    ]


@pytest.fixture
def sample_log_lines():
    """Provide a mix of well-formed and malformed log lines."""
    return [
        make_line("03:32:36", "bob", "192.168.1.100"),
        make_line("03:32:40", "root", "10.0.0.5"),
        "Jun 10 03:33:00 server sshd[12349]: Connection closed",
        "Invalid log line without proper format",
        "",
    ]


@pytest.fixture(autouse=True)
def reset_environment():
    """Reset environment variables after each test."""
    original_env = os.environ.copy()

    yield

    os.environ.clear()
    os.environ.update(original_env)
