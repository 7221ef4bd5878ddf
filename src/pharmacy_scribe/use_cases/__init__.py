from .consultation import ConsultationPipeline

__all__ = ["ConsultationPipeline"]
