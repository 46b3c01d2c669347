"""Remove the persisted session from the durable slot."""
import sys
import os

sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from rapidblood import create_app
from rapidblood.session import current_store

app = create_app()

with app.app_context():
    store = current_store()
    session = store.get_current_session()
    store.logout()

    if session is None:
        print("No persisted session")
    else:
        print(f"Cleared {session.role.value} session for {session.email}")
