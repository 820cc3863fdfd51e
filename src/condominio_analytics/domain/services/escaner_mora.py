"""Servicio de dominio para la detección de mora por propiedad."""
from collections.abc import Collection
from datetime import date
from decimal import Decimal

from condominio_analytics.domain.entities.resultado_mora import ResultadoMora
from condominio_analytics.domain.services.calculadora_cartera import CalculadoraCartera
from condominio_analytics.domain.value_objects.periodo_referencia import PeriodoReferencia

MESES_RETROACTIVOS_DEFECTO = 12
CUOTA_MENSUAL_DEFECTO = Decimal("50.00")


class EscanerMora:
    """
    Servicio de dominio que detecta la racha de meses impagos de una propiedad.

    Reglas de negocio:
    - Un período está pagado si existe al menos un pago de la propiedad para
      ese (mes, año), sin importar concepto ni monto.
    - Se parte del mes que contiene la fecha de corte y se retrocede mes a mes
      hasta `meses_retroactivos` pasos.
    - Si el mes actual está pagado la propiedad está al día.
    - El recorrido se detiene en el primer período pagado: solo se detecta la
      racha impaga que termina en el mes actual, no los huecos anteriores.
    - Si la ventana se agota sin encontrar un pago, la racha empieza en el
      período más antiguo revisado (límite incluido).
    """

    @staticmethod
    def ventana(
        fecha_corte: date,
        meses_retroactivos: int = MESES_RETROACTIVOS_DEFECTO,
    ) -> tuple[PeriodoReferencia, PeriodoReferencia]:
        """
        Rango de períodos que el escaneo puede llegar a revisar.

        Returns:
            (período más antiguo, período actual), ambos incluidos
        """
        if meses_retroactivos < 1:
            raise ValueError(f"meses_retroactivos debe ser >= 1, recibido {meses_retroactivos}")

        actual = PeriodoReferencia.desde_fecha(fecha_corte)
        return actual.desplazar(-(meses_retroactivos - 1)), actual

    @staticmethod
    def escanear(
        propiedad_id: int,
        fecha_corte: date,
        periodos_pagados: Collection[PeriodoReferencia],
        meses_retroactivos: int = MESES_RETROACTIVOS_DEFECTO,
        cuota_estimada: Decimal = CUOTA_MENSUAL_DEFECTO,
    ) -> ResultadoMora:
        """
        Escanea hacia atrás desde la fecha de corte.

        Args:
            propiedad_id: ID de la propiedad escaneada
            fecha_corte: Fecha "hoy" del cálculo
            periodos_pagados: Períodos con al menos un pago (basta con la ventana)
            meses_retroactivos: Cantidad máxima de meses a revisar
            cuota_estimada: Cuota plana usada para estimar la deuda

        Returns:
            ResultadoMora con `al_dia=True` o la racha impaga detectada
        """
        inicio_ventana, actual = EscanerMora.ventana(fecha_corte, meses_retroactivos)

        if actual in periodos_pagados:
            return ResultadoMora(
                propiedad_id=propiedad_id,
                periodo_mas_antiguo=None,
                meses_en_mora=0,
                deuda_estimada=CalculadoraCartera.redondear_monto(Decimal("0")),
                al_dia=True,
            )

        mas_antiguo = actual
        periodo = actual
        while periodo > inicio_ventana:
            periodo = periodo.anterior()
            if periodo in periodos_pagados:
                break
            mas_antiguo = periodo

        meses = CalculadoraCartera.calcular_meses_en_mora(mas_antiguo, actual)

        return ResultadoMora(
            propiedad_id=propiedad_id,
            periodo_mas_antiguo=mas_antiguo,
            meses_en_mora=meses,
            deuda_estimada=CalculadoraCartera.calcular_deuda_estimada(meses, cuota_estimada),
            al_dia=False,
        )
