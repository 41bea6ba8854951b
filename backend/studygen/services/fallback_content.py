"""
Canned study content served when the generation service is unavailable.

STUDY_MATERIALS is keyed by the categories of
subject_classifier.classify_fallback_subject. SAMPLE_QUIZZES only has a
"default" and a "mathematics" set; every other category uses "default".
"""

STUDY_MATERIALS = {
    "default": """
# Study Notes

## Introduction
These general study notes are shown while the content generation service is unavailable. They outline habits that help with any subject.

## Key Concepts
- Learning is a lifelong process
- Good study techniques improve how much you retain
- Reviewing material regularly consolidates it in long-term memory

## Best Study Practices
1. **Keep a consistent schedule** - study at the same time each day
2. **Take regular breaks** - the Pomodoro technique uses 25 minutes of focus followed by a 5-minute break
3. **Teach the material** - explaining a concept to someone else exposes gaps in your understanding
4. **Review on a schedule** - spaced repetition improves long-term recall

## Worked Example
For mathematics:
- Area of a circle: A = πr²
- With a radius of 3 cm: A = π × 3² ≈ 28.27 cm²

## Summary
Effective study means engaging actively with the material, reviewing it regularly and applying it in new contexts.
""",
    "mathematics": """
# Mathematics Study Guide

## Number Theory
Number theory studies the properties of numbers, in particular the integers.

### Prime Numbers
A prime is a natural number greater than 1 whose only divisors are 1 and itself.

**Examples:** 2, 3, 5, 7, 11, 13, 17, 19, 23, 29, ...

### Fundamental Theorem of Arithmetic
Every integer greater than 1 factors into primes in exactly one way, up to the order of the factors.

**Example:** 60 = 2² × 3 × 5

## Algebra

### Quadratic Equations
Standard form: ax² + bx + c = 0 with a ≠ 0.

Quadratic formula: x = (-b ± √(b² - 4ac)) / 2a

**Example:** x² - 5x + 6 = 0 gives a = 1, b = -5, c = 6, so
x = (5 ± √1) / 2, which means x = 3 or x = 2.

## Geometry

### Pythagorean Theorem
In a right triangle the square of the hypotenuse equals the sum of the squares of the other two sides: a² + b² = c².

**Example:** a = 3 and b = 4 give c² = 25, so c = 5.

## Calculus

### Derivatives
A derivative measures how fast a function changes.

**Example:** f(x) = x² has derivative f'(x) = 2x.

### Integrals
Integration reverses differentiation and accumulates quantities.

**Example:** the integral of 2x is x² + C, where C is the constant of integration.
""",
    "history": """
# World History Study Guide

## Ancient Civilizations

### Mesopotamia (c. 3500-500 BCE)
Between the Tigris and Euphrates rivers, often called the "cradle of civilization".

**Key Developments:**
- Cuneiform, the earliest known writing system
- City-states and urban centers
- The Code of Hammurabi, one of the first written legal codes
- Irrigation-based agriculture

### Ancient Egypt (c. 3100-30 BCE)
A civilization along the Nile that lasted for three millennia.

**Key Developments:**
- Hieroglyphic writing
- Pyramids and temple complexes
- Mathematics and astronomy tied to the calendar and the Nile flood
- Religion centered on the pharaoh and the afterlife

## Classical Period

### Ancient Greece (c. 800-146 BCE)
- Athenian democracy
- Philosophy of Socrates, Plato and Aristotle
- Drama, sculpture and architecture
- The Olympic Games

### Roman Empire (27 BCE-476 CE)
- Transition from republic to empire
- Roman law, the basis of many modern legal systems
- Roads, aqueducts and large-scale engineering
- The spread of Christianity

## Middle Ages (476-1453 CE)

### Feudalism
A hierarchy of monarchs, nobles, knights and peasants bound by land and service.

### Islamic Golden Age (c. 750-1258 CE)
- Preservation and extension of Greek and Roman learning
- Advances in mathematics, astronomy and medicine
- Libraries, universities and long-distance trade

## Renaissance and Early Modern Period (c. 1400-1750)

### Renaissance
- Renewed interest in classical texts
- Perspective and realism in art
- Humanist philosophy

### Age of Exploration
- Columbus reaches the Americas (1492)
- Magellan's expedition circles the globe (1519-1522)
- Colonial empires and the Columbian Exchange
""",
    "science": """
# Biology Study Guide

## Cell Structure and Function

### Eukaryotic Cells
Cells with a nucleus and membrane-bound organelles.

- **Nucleus**: holds the DNA
- **Mitochondria**: produce ATP through cellular respiration
- **Endoplasmic reticulum**: builds and transports proteins
- **Golgi apparatus**: modifies, packages and ships proteins
- **Lysosomes**: digest waste with enzymes

### Prokaryotic Cells
Simpler cells without a nucleus: circular DNA in a nucleoid, usually a cell wall, ribosomes, sometimes flagella.

## Genetics

### DNA Structure
Nucleotides made of deoxyribose, a phosphate group and one of four bases (A, T, G, C), arranged as a double helix with A-T and G-C pairing.

### Protein Synthesis
**Transcription** (DNA → RNA): RNA polymerase copies a gene into mRNA, which leaves the nucleus.

**Translation** (RNA → protein): ribosomes read mRNA codons while tRNA delivers amino acids that are chained into a protein.

## Evolution

### Natural Selection
1. Individuals in a population vary
2. More offspring are born than can survive
3. Individuals with useful traits survive and reproduce more
4. Those traits become more common over generations

**Examples:** antibiotic resistance, peppered moths, Darwin's finches.

### Other Mechanisms
- **Mutation**: the source of new genetic variation
- **Gene flow**: movement of alleles between populations
- **Genetic drift**: random changes in allele frequency
- **Sexual selection**: traits that improve mating success

## Ecology

### Energy Flow
Producers capture energy through photosynthesis; it passes to primary, secondary and tertiary consumers, and decomposers recycle the remains. Only about 10% of the energy moves up each trophic level.

### Biogeochemical Cycles
- **Carbon**: photosynthesis, respiration, decomposition, combustion
- **Nitrogen**: fixation, nitrification, denitrification
- **Water**: evaporation, condensation, precipitation, runoff
""",
}

SAMPLE_QUIZZES = {
    "default": [
        {
            "questionText": "What is the primary purpose of effective study techniques?",
            "options": [
                "To reduce study time",
                "To improve knowledge retention",
                "To make learning more difficult",
                "To increase stress levels",
            ],
            "correctOptionIndex": 1,
            "explanation": "Effective study techniques exist to improve retention by engaging with the material in ways that strengthen memory and understanding.",
        },
        {
            "questionText": "Which of the following is a recommended study practice?",
            "options": [
                "Studying for many hours without breaks",
                "Only reviewing material right before exams",
                "Taking regular breaks during study sessions",
                "Studying in noisy environments",
            ],
            "correctOptionIndex": 2,
            "explanation": "Regular breaks, for example with the Pomodoro technique, keep concentration high across a study session.",
        },
        {
            "questionText": "What does the Pomodoro technique suggest?",
            "options": [
                "Studying with music",
                "25 minutes of focus followed by a 5-minute break",
                "Studying late at night",
                "Memorizing rather than understanding",
            ],
            "correctOptionIndex": 1,
            "explanation": "The Pomodoro technique splits work into 25-minute focused intervals separated by 5-minute breaks.",
        },
        {
            "questionText": "Why is teaching concepts to others an effective study method?",
            "options": [
                "It takes less time than other methods",
                "It helps solidify your understanding of the material",
                "It requires no preparation",
                "It only works for mathematical subjects",
            ],
            "correctOptionIndex": 1,
            "explanation": "Explaining a concept forces you to organize it clearly and reveals what you have not yet understood.",
        },
        {
            "questionText": "What is spaced repetition?",
            "options": [
                "Studying the same material repeatedly in one session",
                "Taking long breaks between study sessions",
                "Reviewing material at increasing intervals over time",
                "Studying different subjects at the same time",
            ],
            "correctOptionIndex": 2,
            "explanation": "Spaced repetition reviews material at growing intervals, refreshing each memory just before it would be forgotten.",
        },
    ],
    "mathematics": [
        {
            "questionText": "What is the value of x in the equation 2x + 5 = 13?",
            "options": ["3", "4", "5", "6"],
            "correctOptionIndex": 1,
            "explanation": "Subtract 5 from both sides to get 2x = 8, then divide by 2: x = 4.",
        },
        {
            "questionText": "Which of the following is a prime number?",
            "options": ["1", "15", "17", "21"],
            "correctOptionIndex": 2,
            "explanation": "17 is divisible only by 1 and itself. 1 is not prime, 15 = 3 × 5 and 21 = 3 × 7.",
        },
        {
            "questionText": "What is the area of a circle with radius 4 units?",
            "options": [
                "8π square units",
                "16π square units",
                "4π square units",
                "64π square units",
            ],
            "correctOptionIndex": 1,
            "explanation": "A = πr² = π × 4² = 16π square units.",
        },
        {
            "questionText": "What is the Pythagorean theorem?",
            "options": ["a + b = c", "a² - b² = c²", "a² + b² = c²", "(a + b)² = c²"],
            "correctOptionIndex": 2,
            "explanation": "In a right triangle the square of the hypotenuse c equals the sum of the squares of the legs a and b.",
        },
        {
            "questionText": "If f(x) = 3x² + 2x - 4, what is f(2)?",
            "options": ["8", "10", "12", "16"],
            "correctOptionIndex": 2,
            "explanation": "Substitute x = 2: f(2) = 3(2)² + 2(2) - 4 = 12 + 4 - 4 = 12.",
        },
    ],
}

# Topic-specific introductions spliced in front of the canned notes
STUDY_INTRO_TEMPLATES = {
    "mathematics": (
        "## {topic} Overview\n\n"
        "{topic} is an important area of mathematics for understanding numerical "
        "relationships and solving problems efficiently. The material below covers general "
        "mathematical concepts that apply to this topic.\n\n"
    ),
    "history": (
        "## {topic} Context\n\n"
        "Understanding {topic} requires knowledge of historical events and their significance. "
        "The material below provides context for historical analysis of this topic.\n\n"
    ),
    "science": (
        "## {topic} in Science\n\n"
        "{topic} is an important scientific concept. The material below covers fundamental "
        "scientific principles related to this topic.\n\n"
    ),
    "default": (
        "## Understanding {topic}\n\n"
        "The general study principles below can be applied to learning about {topic}.\n\n"
    ),
}
