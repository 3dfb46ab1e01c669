"""
Esempio: oscillatore armonico d²x/dt² = -w x con x(0)=1, dx/dt(0)=0.

Integra su [0, 50] con Dormand-Prince 5(4) (tolleranze 1e-10), salva la traiettoria
in outputs/harmonic_oscillator.dat e il grafico posizione/tempo in scatter.svg.
La cartella outputs/ deve esistere nella directory corrente.
"""

import sys
from pathlib import Path

# Aggiungi root repository al path
ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT))

from oscsim.core import RunConfig
from oscsim.pipeline import run


def main() -> None:
    config = RunConfig()
    print(f"Simulating HarmonicOscillator(w={config.simulation.w}) "
          f"on [{config.simulation.t_start}, {config.simulation.t_end}]...")
    sys.exit(run(config))


if __name__ == "__main__":
    main()
