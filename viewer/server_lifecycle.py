import os
import sys

def oneshot():
    return os.getenv("INTERVALINDEX_VIEWER_ONESHOT", "true").lower() in ["true", "1"]

def on_server_loaded(server_context):
    if oneshot():
        print("server stops when the session closes (INTERVALINDEX_VIEWER_ONESHOT=false to keep it)")

def on_session_destroyed(session_context):
    if oneshot():
        print("session closed; stopping server...")
        sys.exit(0)
