"""Differential-Drive Wheel Profile Generator

Converts a geometric path and a time-domain motion plan into left and right
wheel trajectories for a differential-drive vehicle.

## Pipeline

Data flows one direction, from time to wheel commands:

### Stage 1: Motion Profile (motion.py)
Commands centerline position, velocity and acceleration as functions of time.
- ConstantVelocityProfile: fixed speed over a distance
- TrapezoidalMotionProfile: accelerate, cruise, decelerate

### Stage 2: Path Geometry (curve.py, bezier.py, lookup_table.py)
Answers curvature and position queries by distance along the path.
- BezierCurve: de Casteljau evaluation, cached derivative curves, signed curvature
- ArcLengthLookupTable: parameter <-> arc length by interpolation
- CircularArc: exact constant-curvature curve

### Stage 3: Trajectory Synthesis (path.py, model.py)
Samples the profile at a fixed cadence and applies the differential-drive
model at each sample's curvature.
- Inner wheel of a turn travels |r - W/2| / |r| of the centerline distance
- Outer wheel travels |r + W/2| / |r|
- Output: index-aligned left and right TrajectoryPoint lists

## Modules

- `config.py` - Centralized tolerances, limits and defaults
- `vector.py` - Immutable 2D vector
- `integrator.py` - Gauss-Legendre quadrature
- `lookup_table.py` - Arc-length lookup table
- `curve.py` - Arc-length indexed curve interface and circular arcs
- `bezier.py` - Bezier curves
- `motion.py` - Motion profiles
- `model.py` - Differential drive wheel ratios
- `path.py` - Path segments and wheel trajectory synthesis
- `cli.py` - Command-line demo

## Quick Start

```python
from diffdrive_profile import BezierCurve, Path, PathSegment, TrapezoidalMotionProfile, Vector2

curve = BezierCurve([Vector2(0, 0), Vector2(1, 0), Vector2(1, 1)])
profile = TrapezoidalMotionProfile(curve.get_total_arc_length(), 1.0, 2.0)
holder = Path(profile, [PathSegment(curve)]).get_trajectory_points(0.5, 0.01)
```

Or use the command-line demo:
```bash
python -m diffdrive_profile --points "0,0 1,0 1,1"
```
"""

__version__ = "0.1.0"

from .bezier import BezierCurve
from .curve import CircularArc, Curve
from .integrator import GaussLegendreIntegrator, integrate
from .lookup_table import ArcLengthLookupTable
from .model import wheel_scale_factors, wheel_velocities
from .motion import ConstantVelocityProfile, MotionProfile, MotionState, TrapezoidalMotionProfile
from .path import Path, PathSegment, TrajectoryHolder, TrajectoryPoint
from .vector import Vector2

__all__ = [
    "Vector2",
    "GaussLegendreIntegrator",
    "integrate",
    "ArcLengthLookupTable",
    "Curve",
    "CircularArc",
    "BezierCurve",
    "MotionState",
    "MotionProfile",
    "ConstantVelocityProfile",
    "TrapezoidalMotionProfile",
    "wheel_scale_factors",
    "wheel_velocities",
    "PathSegment",
    "TrajectoryPoint",
    "TrajectoryHolder",
    "Path",
]
