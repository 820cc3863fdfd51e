"""Conversión de entidades del dominio a payloads serializables (JSON)."""
from decimal import Decimal

from condominio_analytics.domain.entities.pago import Pago
from condominio_analytics.domain.entities.propiedad import Propiedad
from condominio_analytics.domain.entities.resultado_mora import Deudor
from condominio_analytics.domain.entities.resumen_cartera import TotalConcepto, TotalPeriodo


def monto(valor: Decimal) -> float:
    """Montos numéricos viajan como float con dos decimales."""
    return round(float(valor), 2)


def propiedad_a_dict(propiedad: Propiedad) -> dict:
    return {
        "id": propiedad.id,
        "propertyNumber": propiedad.numero,
        "ownerName": propiedad.propietario,
        "contactEmail": propiedad.correo,
        "contactPhone": propiedad.telefono,
        "parkingSpaces": propiedad.puestos_parqueo,
        "status": propiedad.estado.value,
    }


def deudor_a_dict(deudor: Deudor) -> dict:
    # estimatedDebt viaja como texto con dos decimales
    return {
        "propertyId": deudor.propiedad.id,
        "propertyNumber": deudor.propiedad.numero,
        "ownerName": deudor.propiedad.propietario,
        "contactEmail": deudor.propiedad.correo,
        "contactPhone": deudor.propiedad.telefono,
        "oldestUnpaidPeriod": str(deudor.periodo_mas_antiguo),
        "monthsInArrears": deudor.meses_en_mora,
        "estimatedDebt": f"{deudor.deuda_estimada:.2f}",
    }


def tendencia_a_dict(total: TotalPeriodo) -> dict:
    return {"month": str(total.periodo), "total": monto(total.total)}


def concepto_a_dict(total: TotalConcepto) -> dict:
    return {
        "concept": total.concepto.value,
        "count": total.cantidad,
        "total": monto(total.total),
    }


def pago_a_dict(pago: Pago) -> dict:
    return {
        "id": pago.id,
        "propertyId": pago.propiedad_id,
        "concept": pago.concepto.value,
        "amount": monto(pago.monto),
        "paymentDate": pago.fecha_pago.isoformat(),
        "referenceMonth": pago.mes_referencia,
        "referenceYear": pago.año_referencia,
        "paymentMethod": pago.metodo_pago.value,
        "observations": pago.observaciones,
    }
