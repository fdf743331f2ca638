import os
import subprocess
import sys

HERE = os.path.dirname(os.path.abspath(__file__))

scripts = [
    "model_perceptron.py",
    "model_perceptron_sonar.py",
]

for s in scripts:
    print(f"\n=== Running {s} ===")
    subprocess.run(
        [sys.executable, os.path.join(HERE, s)],
        cwd=HERE,
        check=True,
        stdout=sys.stdout,
        stderr=sys.stderr
    )

print("\n=== ALL PERCEPTRON SCRIPTS FINISHED SUCCESSFULLY ===")
