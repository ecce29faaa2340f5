from text_ai.schemas import ExampleText

# Textos de exemplo oferecidos na interface para preencher o campo rapidamente.
EXAMPLES: list[ExampleText] = [
    ExampleText(
        label="Profissional",
        text=(
            "Prezados, gostaria de agendar uma reunião para discutir os resultados "
            "do último trimestre. Fico à disposição para alinharmos um horário."
        ),
    ),
    ExampleText(
        label="Informal",
        text="E aí, tudo certo? Bora marcar aquele café semana que vem? Me avisa!",
    ),
    ExampleText(
        label="Reclamação",
        text=(
            "Recebi o produto com defeito. Exijo um reembolso imediato ou a troca "
            "do item. Aguardo uma solução urgente."
        ),
    ),
]
