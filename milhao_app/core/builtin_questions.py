"""Static question set used whenever the external source is unavailable."""

from __future__ import annotations

from milhao_app.core.models import Difficulty, Question

BUILTIN_QUESTIONS: tuple[Question, ...] = (
    # Levels 1-5
    Question(
        id="local-01",
        text="Quem foi o primeiro homem criado por Deus?",
        options=("Abraão", "Moisés", "Adão", "Noé"),
        correct_option_index=2,
        difficulty=Difficulty.EASY,
        correct_details="Adão (Gênesis 2:7)",
    ),
    Question(
        id="local-02",
        text="Qual animal engoliu o profeta Jonas?",
        options=("Um leão", "Uma baleia (grande peixe)", "Um urso", "Um jacaré"),
        correct_option_index=1,
        difficulty=Difficulty.EASY,
        correct_details="Um grande peixe (Jonas 1:17)",
    ),
    Question(
        id="local-03",
        text="Quantos discípulos Jesus escolheu principalmente?",
        options=("12", "7", "3", "70"),
        correct_option_index=0,
        difficulty=Difficulty.EASY,
        correct_details="Os doze apóstolos (Marcos 3:14)",
    ),
    Question(
        id="local-04",
        text="Em quantos dias Deus criou o mundo segundo Gênesis 1?",
        options=("3 dias", "6 dias", "7 dias", "10 dias"),
        correct_option_index=1,
        difficulty=Difficulty.EASY,
        correct_details="6 dias, descansando no sétimo",
    ),
    Question(
        id="local-05",
        text="Qual era o nome da esposa de Isaque?",
        options=("Sara", "Rebeca", "Raquel", "Lia"),
        correct_option_index=1,
        difficulty=Difficulty.EASY,
        correct_details="Rebeca (Gênesis 24)",
    ),
    # Levels 6-10
    Question(
        id="local-06",
        text="Quem interpretou o sonho do Faraó no Egito?",
        options=("Daniel", "José", "Elias", "Arão"),
        correct_option_index=1,
        difficulty=Difficulty.MEDIUM,
        correct_details="José (Gênesis 41)",
    ),
    Question(
        id="local-07",
        text="Para qual cidade Paulo estava indo quando viu uma grande luz?",
        options=("Jerusalém", "Jericó", "Damasco", "Roma"),
        correct_option_index=2,
        difficulty=Difficulty.MEDIUM,
        correct_details="Damasco (Atos 9)",
    ),
    Question(
        id="local-08",
        text="Quem sucedeu Moisés na liderança do povo de Israel?",
        options=("Calebe", "Josué", "Arão", "Gideão"),
        correct_option_index=1,
        difficulty=Difficulty.MEDIUM,
        correct_details="Josué (Josué 1:1-9)",
    ),
    Question(
        id="local-09",
        text="Qual profeta foi levado ao céu em um redemoinho?",
        options=("Eliseu", "Isaías", "Elias", "Jeremias"),
        correct_option_index=2,
        difficulty=Difficulty.MEDIUM,
        correct_details="Elias (2 Reis 2:11)",
    ),
    Question(
        id="local-10",
        text="Quantos livros tem o Novo Testamento?",
        options=("27", "39", "66", "12"),
        correct_option_index=0,
        difficulty=Difficulty.MEDIUM,
        correct_details="27 livros",
    ),
    # Levels 11-15
    Question(
        id="local-11",
        text="Qual o livro da Bíblia que vem logo após o livro de Jó?",
        options=("Salmos", "Provérbios", "Isaías", "Ester"),
        correct_option_index=0,
        difficulty=Difficulty.HARD,
        correct_details="Salmos",
    ),
    Question(
        id="local-12",
        text="Quem era o pai de João Batista?",
        options=("José", "Zacarias", "Simeão", "Eli"),
        correct_option_index=1,
        difficulty=Difficulty.HARD,
        correct_details="Zacarias (Lucas 1:13)",
    ),
    Question(
        id="local-13",
        text="Qual juiz de Israel derrotou os midianitas com apenas 300 homens?",
        options=("Sansão", "Jefté", "Gideão", "Baraque"),
        correct_option_index=2,
        difficulty=Difficulty.HARD,
        correct_details="Gideão (Juízes 7)",
    ),
    Question(
        id="local-14",
        text="Qual rei da Babilônia mandou lançar três jovens na fornalha ardente?",
        options=("Ciro", "Belsazar", "Dario", "Nabucodonosor"),
        correct_option_index=3,
        difficulty=Difficulty.HARD,
        correct_details="Nabucodonosor (Daniel 3)",
    ),
    Question(
        id="local-15",
        text="Quantos anos viveu Matusalém?",
        options=("969 anos", "930 anos", "950 anos", "777 anos"),
        correct_option_index=0,
        difficulty=Difficulty.HARD,
        correct_details="969 anos (Gênesis 5:27)",
    ),
    # Level 16
    Question(
        id="local-16",
        text="Qual é o capítulo mais curto da Bíblia?",
        options=("Salmo 23", "Salmo 117", "Salmo 119", "Judas 1"),
        correct_option_index=1,
        difficulty=Difficulty.MILLION,
        correct_details="Salmo 117",
    ),
)
