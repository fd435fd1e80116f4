from matplotlib import pyplot as plt

from jax_ivp.equations import van_der_pol_problem
from jax_ivp.integrate import ForwardEuler, RK4, BackwardEuler, solve_with_history


def main(mu=1.0, t_span=(0.0, 20.0), dt=0.01):
    """
    Integrate the Van der Pol oscillator with every stepper and plot the
    phase portraits on top of each other.

    Arguments:
        mu - Damping parameter (default 1.0)
        t_span - Simulation time (default (0.0, 20.0))
        dt - Time step size (default 0.01)
    """
    problem = van_der_pol_problem(mu=mu, s0=(1.0, 1.0), t_span=t_span)

    methods = {
        "Forward Euler": ForwardEuler(dt),
        "RK4": RK4(dt),
        "Backward Euler": BackwardEuler(dt, tolerance=1e-6, on_nonconvergence="warn"),
    }

    fig, ax = plt.subplots()
    for label, method in methods.items():
        t, s = solve_with_history(problem, method, verbose=True)
        ax.plot(s[:, 0], s[:, 1], label=label)
        print(f"{label}: x({t[-1]:.2f}) = {s[-1, 0]:.4f}, v = {s[-1, 1]:.4f}")

    ax.legend()
    ax.set_xlabel('x')
    ax.set_ylabel('dx/dt')
    ax.set_title(f"Van der Pol oscillator, $\\mu={mu}$")
    plt.show()


if __name__ == "__main__":
    main()
