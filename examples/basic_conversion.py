#!/usr/bin/env python
"""Example: Convert a rotation document to every format and compose a chain.

This example demonstrates the simplest usage of the rigidtf API.

Usage:
    python examples/basic_conversion.py <rotation.json|yaml> [<more transforms> ...]
"""

import argparse
import sys
from pathlib import Path

import rigidtf
from rigidtf.metrics import compute_rotation_error


def main():
    parser = argparse.ArgumentParser(
        description="Show a rotation in every format and compose transforms."
    )
    parser.add_argument("documents", nargs="+", help="Rotation or transform documents (JSON, JSON5 or YAML)")
    parser.add_argument(
        "--order",
        default="rpy",
        help="Euler axis order for the Euler form (default: rpy)",
    )
    args = parser.parse_args()

    # Validate inputs
    for document in args.documents:
        if not Path(document).exists():
            print(f"Error: Document not found: {document}")
            return 1

    try:
        values = [rigidtf.load(document) for document in args.documents]
    except rigidtf.RigidTfError as e:
        print(f"Error: {e}")
        return 1

    first = values[0]
    rotation = first.rotation if isinstance(first, rigidtf.Transform) else first

    print("=" * 60)
    print(f"Rotation from {args.documents[0]}")
    print("=" * 60)
    print(f"  Quaternion (i,j,k,w): {rigidtf.to_quaternion_form(rotation).ijkw}")
    euler = rigidtf.into_degrees(rigidtf.to_euler_form(rotation, order=args.order))
    print(f"  Euler ({euler.order}): [{', '.join(str(a) for a in euler.angles)}]")
    axis_angle = rigidtf.into_degrees(rigidtf.to_axis_angle_form(rotation))
    print(f"  Axis-angle: axis={axis_angle.axis} angle={axis_angle.angle}")
    print(f"  Rodrigues: {rigidtf.to_rodrigues_form(rotation).params}")
    print("  Rotation matrix:")
    for row in rigidtf.to_rotation_matrix_form(rotation).matrix:
        print(f"    [{row[0]: .4f}, {row[1]: .4f}, {row[2]: .4f}]")
    print()

    if len(values) > 1:
        transforms = [v if isinstance(v, rigidtf.Transform) else rigidtf.Transform(v) for v in values]
        result = rigidtf.compose(transforms)
        print("Composition:")
        print(rigidtf.dumps(result, "yaml"), end="")
        print(f"  Rotation distance from first: {compute_rotation_error(result, transforms[0]):.4f} deg")
    print("=" * 60)

    return 0


if __name__ == "__main__":
    sys.exit(main())
