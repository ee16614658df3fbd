#!/usr/bin/env python3
"""
ATS Resume Builder - Flask Backend
Collect resume details, generate a structured ATS resume with Gemini, and export it as PDF
"""

import io
import traceback

from flask import Flask, Response, jsonify, render_template, request, send_file
from flask_cors import CORS

from config import has_api_key, load_settings
from errors import ResumeGenerationError
from pdf_generator import export_document
from resume_display import display_context
from resume_form import FORM_FIELDS, default_form, form_values, snapshot_form, validate_form
from resume_generator import ResumeGenerator
from resume_models import resume_to_json
from session_state import Failure, Loading, ResumeSession, Success

UNKNOWN_ERROR = 'An unknown error occurred.'


def create_app(session=None, generator=None):
    """
    Build the Flask app. The session and generator are owned by the app and
    shared by its views; tests pass their own.
    """
    settings = load_settings()
    app = Flask(__name__)
    CORS(app)
    app.config['SECRET_KEY'] = settings['secret_key']
    app.extensions['resume_session'] = session or ResumeSession()
    app.extensions['resume_generator'] = generator or ResumeGenerator(model_name=settings['gemini_model'])

    def _session():
        return app.extensions['resume_session']

    async def _run_generation(values):
        """Run one generation and record its outcome; returns the outcome."""
        session = _session()
        snapshot = snapshot_form(values)
        token = session.start(snapshot)
        try:
            resume = await app.extensions['resume_generator'].generate(snapshot)
        except ResumeGenerationError as e:
            print(f"[api] ❌ Generation failed: {e}")
            session.fail(token, str(e))
        except Exception as e:
            print(f"[api] ❌ Unexpected generation error: {e}")
            traceback.print_exc()
            session.fail(token, str(e) or UNKNOWN_ERROR)
        else:
            session.succeed(token, resume)
        return session.outcome

    def _render_page(values=None, field_errors=None):
        session = _session()
        outcome = session.outcome
        context = {
            'fields': FORM_FIELDS,
            'values': values or session.form_values or default_form(),
            'field_errors': field_errors or [],
            'is_loading': isinstance(outcome, Loading),
            'error': outcome.message if isinstance(outcome, Failure) else None,
            'result': None,
        }
        if isinstance(outcome, Success):
            context['result'] = display_context(outcome.resume)
            context['resume_json'] = resume_to_json(outcome.resume)
        return render_template('index.html', **context)

    @app.route('/')
    def index():
        """Render the form and the current result panel"""
        return _render_page()

    @app.route('/generate', methods=['POST'])
    async def generate():
        """Handle the form submission"""
        values = form_values(request.form)
        missing = validate_form(values)
        if missing:
            print(f"[api] ⚠️ Missing required fields: {', '.join(missing)}")
            return _render_page(values=values, field_errors=missing), 400
        await _run_generation(values)
        return _render_page()

    @app.route('/api/generate', methods=['POST'])
    async def api_generate():
        """Generate a structured resume from JSON form fields"""
        data = request.get_json(silent=True) or {}
        values = form_values(data)
        missing = validate_form(values)
        if missing:
            return jsonify({
                'success': False,
                'error': f"Missing required fields: {', '.join(missing)}"
            }), 400

        outcome = await _run_generation(values)
        if isinstance(outcome, Success):
            return jsonify({
                'success': True,
                'resume': outcome.resume.model_dump()
            })
        message = outcome.message if isinstance(outcome, Failure) else UNKNOWN_ERROR
        return jsonify({
            'success': False,
            'error': message
        }), 500

    @app.route('/api/resume', methods=['GET'])
    def current_resume():
        """Pretty JSON of the current resume (the Copy JSON payload)"""
        result = _session().current_result()
        if result is None:
            return jsonify({'error': 'No resume has been generated yet'}), 404
        return Response(resume_to_json(result.resume), mimetype='application/json')

    @app.route('/api/export/pdf', methods=['GET'])
    def export_pdf():
        """Download the current resume as PDF"""
        result = _session().current_result()
        if result is None:
            return jsonify({'error': 'No resume has been generated yet'}), 404
        # the snapshot travels with the result, so the header always matches this resume
        filename, data = export_document(result.resume, result.snapshot.contact)
        print(f"[api] 📑 Exported {filename}")
        return send_file(
            io.BytesIO(data),
            mimetype='application/pdf',
            as_attachment=True,
            download_name=filename
        )

    @app.route('/api/health', methods=['GET'])
    def health_check():
        """Health check endpoint"""
        return jsonify({
            'status': 'ok',
            'message': 'ATS Resume Builder is running',
            'model': settings['gemini_model'],
            'env_vars': {
                'GEMINI_API_KEY': 'SET' if has_api_key() else 'NOT_SET'
            }
        })

    return app


if __name__ == '__main__':
    settings = load_settings()
    print("🚀 ATS Resume Builder Starting...")
    if not has_api_key():
        print("⚠️  GEMINI_API_KEY not set; generation requests will fail until it is")
    print(f"\n🌐 Open http://localhost:{settings['port']} in your browser")
    print("\nPress Ctrl+C to stop\n")

    create_app().run(debug=settings['debug'], host='0.0.0.0', port=settings['port'])
