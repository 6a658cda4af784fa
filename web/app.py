"""Flask web application for vehicle document expiry reports."""

from pathlib import Path

from dotenv import load_dotenv
from flask import Flask, jsonify, request

# Add parent directory to path for model imports
import sys
sys.path.insert(0, str(Path(__file__).parent.parent))

load_dotenv()

from config import REPORT_ESCAPE_HTML, REPORT_LAYOUT, SECRET_KEY
from logger import get_logger
from models import ProcessingError, ValidationError
from notifier import MailConfig, Notifier
from orchestrator import run_expiry_report
from reports import ReportLayout

logger = get_logger(__name__)

app = Flask(__name__)
app.secret_key = SECRET_KEY
app.config["REPORT_LAYOUT"] = ReportLayout(REPORT_LAYOUT)
app.config["REPORT_ESCAPE_HTML"] = REPORT_ESCAPE_HTML
# Set to a Notifier-like object to bypass SMTP_* environment lookup
app.config["NOTIFIER"] = None


def get_notifier():
    """Configured notifier, or a fresh one built from the environment."""
    notifier = app.config.get("NOTIFIER")
    if notifier is not None:
        return notifier
    return Notifier(MailConfig.from_env())


@app.errorhandler(ValidationError)
def handle_validation_error(error):
    return jsonify({"error": str(error)}), 400


@app.errorhandler(ProcessingError)
def handle_processing_error(error):
    return jsonify({"error": str(error)}), 500


@app.route("/api/process-excel", methods=["POST"])
def process_excel():
    """Read an uploaded vehicle sheet and email the month's expiry report."""
    upload = request.files.get("file")
    email = request.form.get("email")
    month = request.form.get("month")

    if not upload or not email or not month:
        logger.warning("Rejected submission with missing fields")
        raise ValidationError("Missing required fields")

    try:
        data = upload.read()
        logger.info(f"Received '{upload.filename}' ({len(data)} bytes) for {month}, recipient {email}")
        run_expiry_report(
            data,
            email,
            month,
            get_notifier(),
            layout=app.config["REPORT_LAYOUT"],
            escape=app.config["REPORT_ESCAPE_HTML"],
        )
    except Exception as e:
        logger.error(f"Error processing request: {e}", exc_info=True)
        raise ProcessingError("Failed to process the request") from e

    return jsonify({"message": "Report generated and sent successfully"}), 200


if __name__ == "__main__":
    # Using 5001 to avoid conflict with macOS AirPlay Receiver on 5000
    app.run(debug=True, host="0.0.0.0", port=5001)
