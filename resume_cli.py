#!/usr/bin/env python3
"""
CLI for generating an ATS resume from a JSON file of form fields and exporting it as PDF.
"""
import argparse
import asyncio
import json
import sys
from pathlib import Path

from errors import ResumeGenerationError
from pdf_generator import generate_resume_pdf, resume_filename
from resume_form import default_form, form_values, snapshot_form, validate_form
from resume_generator import ResumeGenerator
from resume_models import parse_structured_resume, resume_to_json


def load_form(path):
    """Read form fields from JSON; keys left out fall back to the sample values."""
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    values = default_form()
    values.update({k: v for k, v in form_values(data).items() if k in data})
    return values


def cmd_generate(args, generator=None):
    values = load_form(args.input)
    missing = validate_form(values)
    if missing:
        print(f"❌ Missing required fields: {', '.join(missing)}")
        return 1

    snapshot = snapshot_form(values)
    generator = generator or ResumeGenerator()
    try:
        resume = asyncio.run(generator.generate(snapshot))
    except ResumeGenerationError as e:
        print(f"❌ {e}")
        return 1

    output_dir = Path(args.output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    json_path = output_dir / Path(resume_filename(snapshot.full_name)).with_suffix(".json")
    json_path.write_text(resume_to_json(resume), encoding="utf-8")
    print(f"[cli] ✅ Resume JSON written to {json_path} (ATS score {resume.ats_score})")

    if args.pdf:
        pdf_path = generate_resume_pdf(resume, snapshot.contact, output_dir)
        print(f"[cli] 📑 PDF written to {pdf_path}")
    return 0


def cmd_export(args):
    values = load_form(args.input)
    try:
        resume = parse_structured_resume(Path(args.resume).read_text(encoding="utf-8"))
    except ResumeGenerationError as e:
        print(f"❌ {e}")
        return 1
    pdf_path = generate_resume_pdf(resume, snapshot_form(values).contact, args.output_dir)
    print(f"[cli] 📑 PDF written to {pdf_path}")
    return 0


def build_parser():
    parser = argparse.ArgumentParser(
        description="AI-Powered ATS Resume Builder",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python resume_cli.py generate --input details.json --pdf
  python resume_cli.py export --resume Riya_Patel_Resume.json --input details.json
        """
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    gen = subparsers.add_parser("generate", help="Generate a structured resume with Gemini")
    gen.add_argument("--input", required=True, help="JSON file with the form fields")
    gen.add_argument("--output-dir", default="output", help="Directory for generated files (default: output)")
    gen.add_argument("--pdf", action="store_true", help="Also export the resume as PDF")

    exp = subparsers.add_parser("export", help="Export an existing structured resume as PDF")
    exp.add_argument("--resume", required=True, help="Structured resume JSON file")
    exp.add_argument("--input", required=True, help="JSON file with the contact fields")
    exp.add_argument("--output-dir", default="output", help="Directory for the PDF (default: output)")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    if args.command == "generate":
        return cmd_generate(args)
    return cmd_export(args)


if __name__ == "__main__":
    sys.exit(main())
