import argparse
import subprocess

from sitesmith.backend.app.runner import run as api_run


def main():
    parser = argparse.ArgumentParser(prog="sitesmith", description="Run the sitesmith API server")
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=8000)
    args = parser.parse_args()

    api_proc = api_run(host=args.host, port=args.port)
    try:
        api_proc.wait()
    except KeyboardInterrupt:
        print("\n Ctrl+C received, shutting down...")
    finally:
        if api_proc.poll() is None:
            api_proc.terminate()
            try:
                api_proc.wait(timeout=5)
            except subprocess.TimeoutExpired:
                api_proc.kill()


if __name__ == "__main__":
    main()
