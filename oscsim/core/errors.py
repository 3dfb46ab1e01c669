"""Errori del simulatore, ciascuno con il proprio codice di uscita del processo."""


class OscSimError(Exception):
    """Base per tutti gli errori del pacchetto."""

    exit_code = 1


class IntegrationError(OscSimError):
    """L'integratore adattivo non ha completato (configurazione invalida, step troppo piccolo, ...)."""

    exit_code = 1


class TrajectoryWriteError(OscSimError):
    """Impossibile creare o scrivere il file dei risultati."""

    exit_code = 2


class RenderError(OscSimError):
    """Impossibile costruire o salvare il grafico."""

    exit_code = 3
