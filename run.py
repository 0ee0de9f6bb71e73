"""
Task List Development Server
"""
import os

from app import create_app

app = create_app()

if __name__ == "__main__":
    print("🚀 Starting task list app...")
    app.run(
        host=os.environ.get("HOST", "0.0.0.0"),
        port=int(os.environ.get("PORT", "5000")),
        debug=app.config.get("DEBUG", False),
        use_reloader=False
    )
