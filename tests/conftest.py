import pytest


def auth_line(time, user='bob', address='10.0.0.7', day='10', month='Jun'):
    return (f"{month} {day} {time} ceclnx01 sshd[4412]: Accepted password "
            f"for {user} from {address} port 22 ssh2")


@pytest.fixture
def banned():
    return frozenset({'66.77.88.99', '203.0.113.5'})


@pytest.fixture
def authorized():
    return frozenset({'admin', 'backup'})
