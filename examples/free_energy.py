import numpy as np
import matplotlib.pyplot as plt
from scipy_newton.interpolate import InterpolationEngine, write_grid


# free energy derivative sampled on the normalized coupling parameter
x = np.linspace(0, 1, num=11)
y = np.array([
    51.49866347, 23.92508775, 10.35390700, 2.58426990, -2.18351656,
    -5.41745387, -7.62452181, -9.25455804, -10.45592989, -11.39244138,
    -12.12433704,
])

engine = InterpolationEngine(x, y)
engine.polynomial(report=True)
engine.integral(report=True)
engine.quadrature(report=True)

# write_grid("free_energy.txt", ...) returns False if the file cannot be opened
if not write_grid(engine, "free_energy.txt", 100):
    raise SystemExit(1)

x_grid, y_grid = np.array(list(engine.evaluate_grid(100))).T

fig, ax = plt.subplots()

ax.plot(x, y, "bo", label="samples")
ax.plot(x_grid, y_grid, "-r", label="P(x)")
ax.fill_between(x_grid, y_grid, alpha=0.2)
ax.set_xlabel("lambda")
ax.grid()
ax.legend()

plt.show()
