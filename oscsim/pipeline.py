"""
Pipeline completa: modello -> integrazione -> file dei risultati -> grafico.

run() non solleva eccezioni del pacchetto: ogni errore viene stampato su stderr e
tradotto nel codice di uscita corrispondente (il primo errore incontrato vince).
"""

import sys
from typing import Optional

from oscsim.core.config import RunConfig
from oscsim.core.errors import IntegrationError, RenderError, TrajectoryWriteError
from oscsim.io.serializers import save
from oscsim.physics.library import HarmonicOscillator
from oscsim.simulation import render_chart, simulate


def run(config: Optional[RunConfig] = None) -> int:
    """
    Esegue la simulazione dell'oscillatore armonico e produce i file di output.

    Args:
        config: parametri della run (default: RunConfig()).

    Returns:
        0 se tutto è andato a buon fine, altrimenti l'exit_code del primo errore.
    """
    config = config or RunConfig()
    model = HarmonicOscillator(w=config.simulation.w)

    try:
        trajectory, stats = simulate(model, config.simulation)
    except IntegrationError as exc:
        print(f"An error occurred: {exc}", file=sys.stderr)
        return exc.exit_code
    print(stats)

    status = 0
    data_path = config.output.data_path
    if save(trajectory, data_path):
        print(f"Results saved in: {data_path}")
    else:
        status = TrajectoryWriteError.exit_code

    try:
        render_chart(trajectory, config.chart)
    except RenderError as exc:
        print(f"Could not render chart: {exc}", file=sys.stderr)
        status = status or exc.exit_code
    return status


def main() -> None:
    sys.exit(run())


if __name__ == "__main__":
    main()
