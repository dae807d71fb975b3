"""Build the Lambda deployment zip for the query results stage."""

import argparse
import shutil
import subprocess
from pathlib import Path

PACKAGE_NAME = "textract_query_results"

# Lambda runtime the wheels must match
LAMBDA_PLATFORM = "manylinux2014_x86_64"
LAMBDA_PYTHON_VERSION = "3.12"


def pip_install_command(requirements: Path, target: Path) -> list[str]:
    """pip command that installs Lambda-compatible wheels into target."""
    return [
        "pip", "install",
        "-r", str(requirements),
        "-t", str(target),
        "--platform", LAMBDA_PLATFORM,
        "--python-version", LAMBDA_PYTHON_VERSION,
        "--implementation", "cp",
        "--only-binary=:all:",
        "--upgrade",
    ]


def build(project_dir: Path, output_name: str = "lambda_function") -> Path:
    """Install dependencies and the package into a build folder and zip it.

    Returns:
        Path of the created zip archive.
    """
    build_dir = project_dir / "build"

    if build_dir.exists():
        shutil.rmtree(build_dir)
    build_dir.mkdir()

    subprocess.run(
        pip_install_command(project_dir / "requirements.txt", build_dir),
        check=True,
    )

    shutil.copytree(
        project_dir / "src" / PACKAGE_NAME,
        build_dir / PACKAGE_NAME,
        ignore=shutil.ignore_patterns("__pycache__", "*.pyc"),
    )

    archive = shutil.make_archive(str(project_dir / output_name), "zip", build_dir)
    return Path(archive)


def main():
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--project-dir",
        type=Path,
        default=Path(__file__).resolve().parent.parent,
        help="Project root containing requirements.txt and src/",
    )
    parser.add_argument("--output", default="lambda_function", help="Zip name without extension")
    args = parser.parse_args()

    archive = build(args.project_dir, args.output)
    print(f"Built {archive}")


if __name__ == "__main__":
    main()
