"""Prompt templates for search decisions, claim verification and search analysis.

Templates use str.format placeholders; literal JSON braces are doubled.
"""

NO_HISTORY_PLACEHOLDER = "[Sem histórico - primeira mensagem]"

NO_SOURCES_PLACEHOLDER = "[Nenhuma fonte encontrada na busca]"


SEARCH_DECISION_PROMPT = '''Você é um sistema de raciocínio que decide se precisa de informações atualizadas da web.

HISTÓRICO DA CONVERSA:
{history}

MENSAGEM ATUAL DO USUÁRIO:
"{message}"

SEU CONHECIMENTO:
- Cutoff de conhecimento: {knowledge_cutoff}
- Hoje é: {today}
- Você não tem dados após {knowledge_cutoff}

PROCESSO DE DECISÃO:

1. ANALISE a mensagem do usuário
2. PENSE sobre o que ele está pedindo
3. PERGUNTE a si mesmo:
   - Isso muda com o tempo?
   - Isso aconteceu depois de {knowledge_cutoff}?
   - Eu tenho ABSOLUTA certeza da resposta?
   - O usuário precisa de dados específicos/atuais?
   - É uma conversa casual ou pergunta factual?

4. DECIDA honestamente se você precisa de ajuda da web

EXEMPLOS DE QUANDO BUSCAR:
 "qual o preço do bitcoin agora?" → SIM (muda constantemente)
 "quem ganhou o jogo de ontem?" → SIM (evento específico recente)
 "quanto está o dólar hoje?" → SIM (dados em tempo real)
 "o que aconteceu hoje no Brasil?" → SIM (eventos recentes)

EXEMPLOS DE QUANDO NÃO BUSCAR:
 "oi, tudo bem?" → NÃO (social/casual)
 "explica recursão" → NÃO (conceito atemporal)
 "qual a capital da França?" → NÃO (fato estável, tenho certeza)
 "o que você acha de..." → NÃO (opinião)

REGRA DE OURO: Se você NÃO tem certeza absoluta ou se os dados podem ter mudado, BUSQUE.

Responda APENAS com JSON válido (SEM markdown, SEM texto extra):
{{
  "thought": "Raciocínio: o que o usuário quer + por que preciso/não preciso buscar",
  "needsSearch": true ou false,
  "searchQuery": "query otimizada para busca (se needsSearch=true)" ou "",
  "confidence": número de 0 a 100
}}

RESPONDA AGORA:'''


CLAIM_VERIFICATION_PROMPT = '''Verifique a seguinte afirmação: "{claim}"

FONTES ENCONTRADAS:
{sources}

QUALIDADE DAS FONTES: {quality_score}/100
{quality_details}

Indique se a afirmação é verdadeira, falsa, parcialmente verdadeira ou se não há informações suficientes.
Explique o raciocínio e cite as fontes usando [1], [2], etc.
Informe também o nível de confiança no formato "Confiança: NN%" (0 a 100).'''


SEARCH_ANALYSIS_PROMPT = '''Analise as informações sobre: {query}

FONTES:
{sources}

Forneça um resumo objetivo, destaque consensos e divergências entre as fontes e avalie a confiabilidade.
Cite as fontes usando [1], [2], etc.'''


WEB_DATA_CONTEXT_TEMPLATE = '''{additional_context}

[DADOS ATUALIZADOS DA WEB - USE PARA RESPONDER]
{search_context}
[FIM DOS DADOS]

Responda à pergunta do usuário usando estes dados atualizados. Seja natural e conversacional. Cite fontes quando relevante usando [1], [2], etc.'''


__all__ = [
    "NO_HISTORY_PLACEHOLDER",
    "NO_SOURCES_PLACEHOLDER",
    "SEARCH_DECISION_PROMPT",
    "CLAIM_VERIFICATION_PROMPT",
    "SEARCH_ANALYSIS_PROMPT",
    "WEB_DATA_CONTEXT_TEMPLATE",
]
