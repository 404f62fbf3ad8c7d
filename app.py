"""Development entry point: `python app.py` (production: `flask --app app run` behind a WSGI server)."""

from src.payroll_system.payroll_system.main import create_app

app = create_app()

if __name__ == "__main__":
    app.run(debug=app.config["DEBUG"])
